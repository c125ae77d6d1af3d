"""Users 도메인 리포지토리

사용자 문서에 대한 데이터 접근 계층입니다.
"""

import uuid
from typing import Optional, Sequence, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from viviendas_api.domains.users.models import User
from viviendas_api.domains.users.query import UserFilters, build_user_query


class UserRepository:
    """사용자 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """ID로 사용자 조회 (removed 여부와 무관)

        Args:
            user_id: 사용자 ID

        Returns:
            사용자 객체 또는 None
        """
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        """이메일로 사용자 조회 (removed 여부와 무관)"""
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return cast(Optional[User], result.scalar_one_or_none())

    async def get_by_dni(self, dni: str) -> Optional[User]:
        """DNI로 사용자 조회 (removed 여부와 무관)"""
        result = await self.session.execute(
            select(User).where(User.dni == dni)
        )
        return cast(Optional[User], result.scalar_one_or_none())

    async def get_list(
        self,
        filters: UserFilters,
        skip: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Sequence[User]:
        """필터 조건에 맞는 활성 사용자 목록 조회

        Args:
            filters: 목록 필터
            skip: 건너뛸 레코드 수
            limit: 조회할 최대 레코드 수

        Returns:
            사용자 목록
        """
        query = build_user_query(filters, skip=skip, limit=limit)
        result = await self.session.execute(query)
        return cast(Sequence[User], result.scalars().all())

    async def create(self, user: User) -> User:
        """사용자 생성"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User) -> User:
        """사용자 수정 (변경된 속성을 flush)"""
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def soft_delete(self, user: User) -> User:
        """사용자 Soft Delete (removed = true)"""
        user.removed = True
        await self.session.flush()
        await self.session.refresh(user)
        return user
