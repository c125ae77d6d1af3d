"""Users 도메인 서비스

사용자 목록/조회/생성/수정/삭제 비즈니스 로직 계층입니다.
"""

import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from viviendas_api.core.exceptions import (
    PersistenceException,
    ResourcesNotFoundException,
)
from viviendas_api.core.logging import get_logger
from viviendas_api.core.middlewares.context import get_request_id
from viviendas_api.domains.users.exceptions import (
    UserAlreadyExistsException,
    UserNotFoundException,
)
from viviendas_api.domains.users.models import User
from viviendas_api.domains.users.query import UserFilters
from viviendas_api.domains.users.repository import UserRepository
from viviendas_api.domains.users.schemas import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """사용자 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = UserRepository(session)

    async def get_users(
        self,
        filters: UserFilters,
        skip: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[User]:
        """사용자 목록 조회

        Args:
            filters: 목록 필터
            skip: 건너뛸 레코드 수
            limit: 조회할 최대 레코드 수

        Returns:
            사용자 목록 (1건 이상)

        Raises:
            ResourcesNotFoundException: 조건에 맞는 사용자가 없는 경우
        """
        users = await self.repository.get_list(filters, skip=skip, limit=limit)
        if not users:
            raise ResourcesNotFoundException()
        return list(users)

    async def get_user(self, user_id: uuid.UUID) -> User:
        """사용자 조회 (Soft Delete 된 사용자 포함)

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id=user_id)
        return user

    async def create_user(self, user_data: UserCreate) -> User:
        """사용자 생성

        email, dni 중복은 저장 전에 검사합니다. 동시 요청으로 인한
        유일성 위반은 저장소에서 거부되며 PersistenceException 으로 변환됩니다.

        Raises:
            UserAlreadyExistsException: email 또는 dni 가 이미 사용 중인 경우
            PersistenceException: 저장소가 쓰기를 거부한 경우
        """
        if await self.repository.get_by_email(user_data.email):
            raise UserAlreadyExistsException("email", user_data.email)
        if await self.repository.get_by_dni(user_data.dni):
            raise UserAlreadyExistsException("dni", user_data.dni)

        user = User(**user_data.model_dump())
        try:
            created_user = await self.repository.create(user)
        except IntegrityError as e:
            raise PersistenceException(
                message=f"No se pudo agregar el usuario. Error: {e.orig}"
            ) from e

        logger.info(
            "User created",
            extra={
                "request_id": get_request_id(),
                "user_id": str(created_user.id),
                "action": "created",
            },
        )
        return created_user

    async def update_user(
        self, user_id: uuid.UUID, user_data: UserUpdate
    ) -> User:
        """사용자 수정 (전달된 필드만 병합)

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
            PersistenceException: 유일성 위반 등으로 저장소가 거부한 경우
        """
        user = await self.get_user(user_id)

        changes = user_data.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in changes.items():
            setattr(user, key, value)

        try:
            updated_user = await self.repository.update(user)
        except IntegrityError as e:
            raise PersistenceException(
                message=f"No se pudo actualizar el usuario. Error: {e.orig}"
            ) from e

        logger.info(
            "User updated",
            extra={
                "request_id": get_request_id(),
                "user_id": str(user_id),
                "action": "updated",
                "fields": sorted(changes),
            },
        )
        return updated_user

    async def delete_user(self, user_id: uuid.UUID) -> None:
        """사용자 Soft Delete

        이미 삭제된 사용자도 다시 삭제할 수 있습니다 (멱등).

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.get_user(user_id)
        await self.repository.soft_delete(user)

        logger.info(
            "User deleted",
            extra={
                "request_id": get_request_id(),
                "user_id": str(user_id),
                "action": "deleted",
            },
        )
