"""Departments 도메인 리포지토리"""

import uuid
from typing import Optional, Sequence, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from viviendas_api.domains.departments.models import Department


class DepartmentRepository:
    """주거 단위 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, department_id: uuid.UUID) -> Optional[Department]:
        """ID로 주거 단위 조회 (removed 여부와 무관)"""
        return await self.session.get(Department, department_id)

    async def get_list(self) -> Sequence[Department]:
        """활성 주거 단위 목록 조회 (필터 없음)"""
        result = await self.session.execute(
            select(Department).where(Department.active())
        )
        return cast(Sequence[Department], result.scalars().all())

    async def create(self, department: Department) -> Department:
        self.session.add(department)
        await self.session.flush()
        await self.session.refresh(department)
        return department

    async def update(self, department: Department) -> Department:
        await self.session.flush()
        await self.session.refresh(department)
        return department

    async def soft_delete(self, department: Department) -> Department:
        department.removed = True
        await self.session.flush()
        await self.session.refresh(department)
        return department
