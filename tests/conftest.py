"""테스트 설정"""

import itertools
import os
from datetime import datetime, timezone
from typing import Generator
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from docker import from_env
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from testcontainers.postgres import PostgresContainer

from viviendas_api.core.database import Base, get_db
from viviendas_api.domains.departments.router import get_department_service
from viviendas_api.domains.departments.service import DepartmentService
from viviendas_api.domains.users.router import get_user_service
from viviendas_api.domains.users.service import UserService
from viviendas_api.main import app


def _is_docker_available() -> bool:
    """로컬 환경에서 Docker 접근 가능 여부 확인"""
    if os.getenv("FORCE_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return True
    if os.getenv("SKIP_DOCKER_TESTS", "").lower() in {"1", "true"}:
        return False

    try:
        client = from_env()
        client.ping()
        return True
    except DockerException:
        return False
    except Exception:
        return False


DOCKER_AVAILABLE = _is_docker_available()


@pytest.fixture(scope="session")
def user_payload_factory():
    """겹치지 않는 email/dni 를 가진 사용자 생성 요청 본문 팩토리"""
    counter = itertools.count(start=1)

    def _factory(**overrides):
        n = next(counter)
        payload = {
            "email": f"user{n}@example.com",
            "dni": f"DNI-{n:06d}",
            "name": f"Name{n}",
            "surname": f"Surname{n}",
            "age": 30,
        }
        payload.update(overrides)
        return payload

    return _factory


@pytest.fixture
def department_payload():
    """주거 단위 생성 요청 본문"""
    return {
        "type": "departamento",
        "location": "Av. Corrientes 1234",
        "district": "Almagro",
        "floor": 3,
        "department": "B",
        "flat_rooms": 2,
    }


@pytest.fixture
def now():
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Mock 서비스 기반 API 클라이언트 (DB 불필요)
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_user_service():
    """UserService Mock (async 메서드는 AsyncMock)"""
    return MagicMock(spec=UserService)


@pytest.fixture
def mock_department_service():
    """DepartmentService Mock (async 메서드는 AsyncMock)"""
    return MagicMock(spec=DepartmentService)


@pytest_asyncio.fixture
async def api_client(mock_user_service, mock_department_service):
    """서비스 의존성을 Mock 으로 교체한 테스트 클라이언트"""
    app.dependency_overrides[get_user_service] = lambda: mock_user_service
    app.dependency_overrides[get_department_service] = (
        lambda: mock_department_service
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# PostgreSQL 컨테이너 기반 fixture
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """PostgreSQL 테스트 컨테이너"""
    if not DOCKER_AVAILABLE:
        pytest.skip("Docker is not available; skipping container-based tests.")

    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def test_database_url(postgres_container: PostgresContainer) -> str:
    """테스트 데이터베이스 URL (asyncpg)"""
    return str(
        postgres_container.get_connection_url().replace(
            "postgresql+psycopg2://", "postgresql+asyncpg://"
        )
    )


# NOTE:
# pytest-asyncio 는 테스트마다 독립적인 event loop 를 생성하므로
# async fixture 는 모두 function 스코프로 유지
@pytest_asyncio.fixture
async def db_session(test_database_url: str):
    """테스트 데이터베이스 세션 (테스트마다 깨끗한 스키마)"""
    engine = create_async_engine(test_database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await engine.dispose()


@pytest_asyncio.fixture
async def client(db_session):
    """비동기 테스트 클라이언트 (테스트 DB 사용)"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
