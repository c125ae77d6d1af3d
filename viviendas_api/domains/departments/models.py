"""Departments 도메인 모델 정의

departments 컬렉션(주거 단위, 비비엔다)의 문서를 테이블로 매핑합니다.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from viviendas_api.core.database import Base, SoftDeleteMixin


class Department(SoftDeleteMixin, Base):
    """주거 단위 모델"""

    __tablename__ = "departments"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    type: Mapped[str] = mapped_column(
        String(100), nullable=False, comment="주거 형태 (casa, departamento 등)"
    )
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    district: Mapped[str] = mapped_column(String(255), nullable=False)
    floor: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    department: Mapped[Optional[str]] = mapped_column(
        String(50), nullable=True, comment="호실 표기"
    )
    flat_rooms: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, comment="방 개수"
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
            f"<Department(id={self.id}, type={self.type}, "
            f"district={self.district}, removed={self.removed})>"
        )
