"""Departments 도메인 모듈 (주거 단위, /viviendas)

구조:
    - models.py: SQLAlchemy 모델 정의 (Department)
    - schemas.py: Pydantic 스키마
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from viviendas_api.domains.departments.exceptions import (
    DepartmentErrorCode,
    DepartmentNotFoundException,
)
from viviendas_api.domains.departments.models import Department
from viviendas_api.domains.departments.router import router
from viviendas_api.domains.departments.schemas import (
    DepartmentCreate,
    DepartmentResponse,
    DepartmentUpdate,
)
from viviendas_api.domains.departments.service import DepartmentService

__all__ = [
    "Department",
    "DepartmentService",
    "DepartmentCreate",
    "DepartmentUpdate",
    "DepartmentResponse",
    "router",
    "DepartmentErrorCode",
    "DepartmentNotFoundException",
]
