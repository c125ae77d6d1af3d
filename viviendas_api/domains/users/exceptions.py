"""Users 도메인 예외 정의"""

import uuid
from enum import Enum
from typing import Optional

from viviendas_api.core.exceptions import (
    ConflictException,
    NotFoundException,
    UnprocessableEntityException,
)


class UserErrorCode(str, Enum):
    """사용자 도메인 에러 코드"""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    INVALID_FILTER_FIELD = "INVALID_FILTER_FIELD"
    INVALID_SORT_FIELD = "INVALID_SORT_FIELD"


class UserNotFoundException(NotFoundException):
    """사용자를 찾을 수 없는 경우"""

    def __init__(self, user_id: Optional[uuid.UUID] = None):
        detail = {"user_id": str(user_id)} if user_id else {}
        super().__init__(
            message="Usuario no encontrado.",
            error_code=UserErrorCode.USER_NOT_FOUND,
            detail=detail,
        )


class UserAlreadyExistsException(ConflictException):
    """email 또는 dni 가 이미 사용 중인 경우"""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"Ya existe un usuario con ese {field}.",
            error_code=UserErrorCode.USER_ALREADY_EXISTS,
            detail={"field": field, "value": value},
        )


class InvalidFilterFieldException(UnprocessableEntityException):
    """필터할 수 없는 필드로 목록을 조회한 경우"""

    def __init__(self, field: str, allowed: tuple[str, ...]):
        super().__init__(
            message=f"No se puede filtrar por el campo '{field}'.",
            error_code=UserErrorCode.INVALID_FILTER_FIELD,
            detail={"field": field, "allowed": list(allowed)},
        )


class InvalidSortFieldException(UnprocessableEntityException):
    """정렬할 수 없는 필드로 목록을 조회한 경우"""

    def __init__(self, field: str, allowed: tuple[str, ...]):
        super().__init__(
            message=f"No se puede ordenar por el campo '{field}'.",
            error_code=UserErrorCode.INVALID_SORT_FIELD,
            detail={"field": field, "allowed": list(allowed)},
        )
