"""Users 도메인 모듈

구조:
    - models.py: SQLAlchemy 모델 정의 (User)
    - schemas.py: Pydantic 스키마 (UserCreate, UserUpdate, UserResponse)
    - query.py: 목록 조회 쿼리 빌더 (필터, 검색, 정렬)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직
    - router.py: API 엔드포인트 (/usuarios)
    - exceptions.py: 도메인 예외
"""

from viviendas_api.domains.users.exceptions import (
    InvalidFilterFieldException,
    InvalidSortFieldException,
    UserAlreadyExistsException,
    UserErrorCode,
    UserNotFoundException,
)
from viviendas_api.domains.users.models import User
from viviendas_api.domains.users.query import UserFilters
from viviendas_api.domains.users.router import router
from viviendas_api.domains.users.schemas import (
    UserCreate,
    UserResponse,
    UserUpdate,
)
from viviendas_api.domains.users.service import UserService

__all__ = [
    "User",
    "UserService",
    "UserFilters",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "router",
    "UserErrorCode",
    "UserNotFoundException",
    "UserAlreadyExistsException",
    "InvalidFilterFieldException",
    "InvalidSortFieldException",
]
