"""Departments 도메인 예외 정의"""

import uuid
from enum import Enum
from typing import Optional

from viviendas_api.core.exceptions import NotFoundException


class DepartmentErrorCode(str, Enum):
    """주거 단위 도메인 에러 코드"""

    DEPARTMENT_NOT_FOUND = "DEPARTMENT_NOT_FOUND"


class DepartmentNotFoundException(NotFoundException):
    """주거 단위를 찾을 수 없는 경우"""

    def __init__(self, department_id: Optional[uuid.UUID] = None):
        detail = {"department_id": str(department_id)} if department_id else {}
        super().__init__(
            message="Vivienda no encontrada.",
            error_code=DepartmentErrorCode.DEPARTMENT_NOT_FOUND,
            detail=detail,
        )
