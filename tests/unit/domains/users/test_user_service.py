"""User Service 단위 테스트"""

import uuid
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.exc import IntegrityError

from viviendas_api.core.exceptions import (
    PersistenceException,
    ResourcesNotFoundException,
)
from viviendas_api.domains.users.exceptions import (
    UserAlreadyExistsException,
    UserNotFoundException,
)
from viviendas_api.domains.users.models import User
from viviendas_api.domains.users.query import UserFilters
from viviendas_api.domains.users.schemas import UserCreate, UserUpdate
from viviendas_api.domains.users.service import UserService


def make_user(**overrides) -> User:
    data = {
        "id": uuid.uuid4(),
        "email": "a@x.com",
        "dni": "1",
        "name": "Ann",
        "surname": "Lee",
        "age": 25,
        "departments": [],
    }
    data.update(overrides)
    return User(**data)


@pytest.fixture
def mock_session():
    """Mock AsyncSession"""
    return MagicMock()


@pytest.fixture
def user_service(mock_session):
    """UserService 인스턴스"""
    return UserService(mock_session)


class TestUserServiceList:
    """UserService 목록 조회 테스트"""

    @pytest.mark.asyncio
    async def test_get_users_returns_matches(self, user_service):
        # Given
        users = [make_user(), make_user(email="b@x.com", dni="2")]
        user_service.repository.get_list = AsyncMock(return_value=users)
        filters = UserFilters(age=25)

        # When
        result = await user_service.get_users(filters)

        # Then
        assert result == users
        user_service.repository.get_list.assert_called_once_with(
            filters, skip=None, limit=None
        )

    @pytest.mark.asyncio
    async def test_get_users_passes_pagination(self, user_service):
        user_service.repository.get_list = AsyncMock(return_value=[make_user()])
        filters = UserFilters()

        await user_service.get_users(filters, skip=20, limit=10)

        user_service.repository.get_list.assert_called_once_with(
            filters, skip=20, limit=10
        )

    @pytest.mark.asyncio
    async def test_empty_result_is_not_found(self, user_service):
        """빈 목록은 성공이 아니라 NotFound"""
        user_service.repository.get_list = AsyncMock(return_value=[])

        with pytest.raises(ResourcesNotFoundException):
            await user_service.get_users(UserFilters())


class TestUserServiceGet:
    """UserService 단건 조회 테스트"""

    @pytest.mark.asyncio
    async def test_get_user_success(self, user_service):
        user = make_user()
        user_service.repository.get_by_id = AsyncMock(return_value=user)

        result = await user_service.get_user(user.id)

        assert result == user
        user_service.repository.get_by_id.assert_called_once_with(user.id)

    @pytest.mark.asyncio
    async def test_get_removed_user_is_allowed(self, user_service):
        """Soft Delete 된 사용자도 ID 로 조회 가능"""
        user = make_user(removed=True)
        user_service.repository.get_by_id = AsyncMock(return_value=user)

        result = await user_service.get_user(user.id)

        assert result.removed is True

    @pytest.mark.asyncio
    async def test_get_user_not_found(self, user_service):
        user_service.repository.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(UserNotFoundException):
            await user_service.get_user(uuid.uuid4())


class TestUserServiceCreate:
    """UserService 생성 테스트"""

    @pytest.fixture
    def user_data(self):
        return UserCreate(
            email="a@x.com", dni="1", name="Ann", surname="Lee", age=25
        )

    @pytest.mark.asyncio
    async def test_create_user_success(self, user_service, user_data):
        # Given
        user_service.repository.get_by_email = AsyncMock(return_value=None)
        user_service.repository.get_by_dni = AsyncMock(return_value=None)
        user_service.repository.create = AsyncMock(
            side_effect=lambda user: user
        )

        # When
        with patch("viviendas_api.domains.users.service.logger") as mock_logger:
            result = await user_service.create_user(user_data)

            # Then
            assert result.email == "a@x.com"
            assert result.name == "Ann"
            assert result.age == 25
            user_service.repository.create.assert_called_once()
            mock_logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected_before_persisting(
        self, user_service, user_data
    ):
        user_service.repository.get_by_email = AsyncMock(
            return_value=make_user()
        )
        user_service.repository.get_by_dni = AsyncMock(return_value=None)
        user_service.repository.create = AsyncMock()

        with pytest.raises(UserAlreadyExistsException) as exc_info:
            await user_service.create_user(user_data)

        assert exc_info.value.detail_info["field"] == "email"
        user_service.repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_dni_is_rejected_before_persisting(
        self, user_service, user_data
    ):
        user_service.repository.get_by_email = AsyncMock(return_value=None)
        user_service.repository.get_by_dni = AsyncMock(
            return_value=make_user()
        )
        user_service.repository.create = AsyncMock()

        with pytest.raises(UserAlreadyExistsException) as exc_info:
            await user_service.create_user(user_data)

        assert exc_info.value.detail_info["field"] == "dni"
        user_service.repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_rejection_becomes_persistence_error(
        self, user_service, user_data
    ):
        """동시 생성 등으로 저장소가 거부하면 400"""
        user_service.repository.get_by_email = AsyncMock(return_value=None)
        user_service.repository.get_by_dni = AsyncMock(return_value=None)
        user_service.repository.create = AsyncMock(
            side_effect=IntegrityError(
                "INSERT INTO users", {}, Exception("duplicate key value")
            )
        )

        with pytest.raises(PersistenceException) as exc_info:
            await user_service.create_user(user_data)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == (
            "No se pudo agregar el usuario. Error: duplicate key value"
        )


class TestUserServiceUpdate:
    """UserService 수정 테스트"""

    @pytest.mark.asyncio
    async def test_update_merges_only_sent_fields(self, user_service):
        # Given
        user = make_user(description="old")
        user_service.repository.get_by_id = AsyncMock(return_value=user)
        user_service.repository.update = AsyncMock(side_effect=lambda u: u)

        # When
        with patch("viviendas_api.domains.users.service.logger"):
            result = await user_service.update_user(
                user.id, UserUpdate(name="Anna")
            )

        # Then
        assert result.name == "Anna"
        assert result.surname == "Lee"
        assert result.description == "old"

    @pytest.mark.asyncio
    async def test_update_can_restore_removed_user(self, user_service):
        user = make_user(removed=True)
        user_service.repository.get_by_id = AsyncMock(return_value=user)
        user_service.repository.update = AsyncMock(side_effect=lambda u: u)

        with patch("viviendas_api.domains.users.service.logger"):
            result = await user_service.update_user(
                user.id, UserUpdate(removed=False)
            )

        assert result.removed is False

    @pytest.mark.asyncio
    async def test_update_ignores_null_values(self, user_service):
        user = make_user()
        user_service.repository.get_by_id = AsyncMock(return_value=user)
        user_service.repository.update = AsyncMock(side_effect=lambda u: u)

        with patch("viviendas_api.domains.users.service.logger"):
            result = await user_service.update_user(
                user.id, UserUpdate(name=None)
            )

        assert result.name == "Ann"

    @pytest.mark.asyncio
    async def test_update_not_found(self, user_service):
        user_service.repository.get_by_id = AsyncMock(return_value=None)
        user_service.repository.update = AsyncMock()

        with pytest.raises(UserNotFoundException):
            await user_service.update_user(uuid.uuid4(), UserUpdate(age=40))

        user_service.repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_unique_violation_is_persistence_error(
        self, user_service
    ):
        user = make_user()
        user_service.repository.get_by_id = AsyncMock(return_value=user)
        user_service.repository.update = AsyncMock(
            side_effect=IntegrityError("UPDATE users", {}, Exception("dup"))
        )

        with pytest.raises(PersistenceException):
            await user_service.update_user(
                user.id, UserUpdate(email="b@x.com")
            )


class TestUserServiceDelete:
    """UserService 삭제 테스트"""

    @pytest.mark.asyncio
    async def test_delete_user_success(self, user_service):
        user = make_user()
        user_service.repository.get_by_id = AsyncMock(return_value=user)
        user_service.repository.soft_delete = AsyncMock()

        with patch("viviendas_api.domains.users.service.logger") as mock_logger:
            await user_service.delete_user(user.id)

            user_service.repository.soft_delete.assert_called_once_with(user)
            mock_logger.info.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_already_removed_user_is_allowed(self, user_service):
        user = make_user(removed=True)
        user_service.repository.get_by_id = AsyncMock(return_value=user)
        user_service.repository.soft_delete = AsyncMock()

        with patch("viviendas_api.domains.users.service.logger"):
            await user_service.delete_user(user.id)

        user_service.repository.soft_delete.assert_called_once_with(user)

    @pytest.mark.asyncio
    async def test_delete_user_not_found(self, user_service):
        user_service.repository.get_by_id = AsyncMock(return_value=None)
        user_service.repository.soft_delete = AsyncMock()

        with pytest.raises(UserNotFoundException):
            await user_service.delete_user(uuid.uuid4())

        user_service.repository.soft_delete.assert_not_called()
