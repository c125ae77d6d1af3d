from typing import AsyncGenerator, Optional

from sqlalchemy import Boolean, ColumnElement
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from viviendas_api.core.config import settings

# 비동기 엔진 생성
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    pool_size=10,
    max_overflow=20,
)

# 비동기 세션 팩토리
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 모델 베이스 클래스"""

    pass


class SoftDeleteMixin:
    """removed 플래그 기반 Soft Delete 믹스인

    removed 가 NULL 인 문서(필드가 없는 문서)는 활성 상태로 취급합니다.
    """

    removed: Mapped[Optional[bool]] = mapped_column(
        Boolean,
        nullable=True,
        default=None,
        comment="논리 삭제 여부 (Soft Delete)",
    )

    @classmethod
    def active(cls) -> ColumnElement[bool]:
        """활성 문서 조건 (removed IS NOT TRUE)

        모든 목록 조회 경로는 이 조건을 사용해야 합니다.
        """
        return cls.removed.is_not(True)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """데이터베이스 세션 의존성"""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """테이블 생성 (마이그레이션 없이 create_all 사용)"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """데이터베이스 연결 종료"""
    await engine.dispose()
