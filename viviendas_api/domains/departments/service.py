"""Departments 도메인 서비스"""

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from viviendas_api.core.exceptions import (
    PersistenceException,
    ResourcesNotFoundException,
)
from viviendas_api.core.logging import get_logger
from viviendas_api.core.middlewares.context import get_request_id
from viviendas_api.domains.departments.exceptions import (
    DepartmentNotFoundException,
)
from viviendas_api.domains.departments.models import Department
from viviendas_api.domains.departments.repository import DepartmentRepository
from viviendas_api.domains.departments.schemas import (
    DepartmentCreate,
    DepartmentUpdate,
)

logger = get_logger(__name__)


class DepartmentService:
    """주거 단위 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = DepartmentRepository(session)

    async def get_departments(self) -> list[Department]:
        """활성 주거 단위 목록 조회

        Raises:
            ResourcesNotFoundException: 활성 주거 단위가 없는 경우
        """
        departments = await self.repository.get_list()
        if not departments:
            raise ResourcesNotFoundException()
        return list(departments)

    async def get_department(self, department_id: uuid.UUID) -> Department:
        """주거 단위 조회 (Soft Delete 된 문서 포함)

        Raises:
            DepartmentNotFoundException: 주거 단위를 찾을 수 없는 경우
        """
        department = await self.repository.get_by_id(department_id)
        if not department:
            raise DepartmentNotFoundException(department_id=department_id)
        return department

    async def create_department(self, data: DepartmentCreate) -> Department:
        """주거 단위 생성

        Raises:
            PersistenceException: 저장소가 쓰기를 거부한 경우
        """
        department = Department(**data.model_dump())
        try:
            created = await self.repository.create(department)
        except IntegrityError as e:
            raise PersistenceException(
                message=f"No se pudo agregar la vivienda. Error: {e.orig}"
            ) from e

        logger.info(
            "Department created",
            extra={
                "request_id": get_request_id(),
                "department_id": str(created.id),
                "action": "created",
            },
        )
        return created

    async def update_department(
        self, department_id: uuid.UUID, data: DepartmentUpdate
    ) -> Department:
        """주거 단위 수정 (전달된 필드만 병합)"""
        department = await self.get_department(department_id)

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in changes.items():
            setattr(department, key, value)

        try:
            updated = await self.repository.update(department)
        except IntegrityError as e:
            raise PersistenceException(
                message=f"No se pudo actualizar la vivienda. Error: {e.orig}"
            ) from e

        logger.info(
            "Department updated",
            extra={
                "request_id": get_request_id(),
                "department_id": str(department_id),
                "action": "updated",
                "fields": sorted(changes),
            },
        )
        return updated

    async def delete_department(self, department_id: uuid.UUID) -> None:
        """주거 단위 Soft Delete (이미 삭제된 문서도 허용)"""
        department = await self.get_department(department_id)
        await self.repository.soft_delete(department)

        logger.info(
            "Department deleted",
            extra={
                "request_id": get_request_id(),
                "department_id": str(department_id),
                "action": "deleted",
            },
        )
