"""Users 도메인 모델 정의

users 컬렉션의 문서를 테이블로 매핑합니다.
ID는 저장소에서 발급하는 불투명한 UUID 입니다.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, Uuid, func, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from viviendas_api.core.database import Base, SoftDeleteMixin


class User(SoftDeleteMixin, Base):
    """사용자 모델

    email, dni 는 전역 유일합니다. departments 는 소유/관심 주거 단위 ID
    목록으로 선언만 되어 있으며 참조 무결성은 검사하지 않습니다.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    surname: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, comment="이메일 (유일)"
    )
    dni: Mapped[str] = mapped_column(
        String(64), unique=True, nullable=False, comment="신분증 번호 (유일)"
    )
    age: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    picture: Mapped[Optional[str]] = mapped_column(
        String(2048), nullable=True, comment="프로필 이미지 URI"
    )
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    departments: Mapped[list[str]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        server_default=text("'[]'::jsonb"),
        comment="주거 단위 참조 목록",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )

    def __repr__(self) -> str:
        return (
            f"<User(id={self.id}, email={self.email}, "
            f"removed={self.removed})>"
        )
