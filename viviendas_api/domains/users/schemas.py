"""Users 도메인 스키마 정의

생성/수정 요청은 작업별 입력 스키마로 검증한 뒤 모델에 매핑합니다.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from viviendas_api.core.schemas import BaseSchema, TimestampMixin


class UserCreate(BaseModel):
    """사용자 생성 요청 스키마"""

    email: EmailStr = Field(..., description="이메일 (유일)")
    dni: str = Field(..., min_length=1, max_length=64, description="신분증 번호 (유일)")
    name: str = Field(..., min_length=1, max_length=255)
    surname: str = Field(..., min_length=1, max_length=255)
    age: int = Field(..., ge=18, description="나이 (18세 이상)")
    picture: Optional[str] = Field(default=None, max_length=2048)
    description: Optional[str] = None


class UserUpdate(BaseModel):
    """사용자 수정 요청 스키마

    전달된 필드만 병합됩니다. null 값은 무시됩니다.
    나이 하한(18세)은 생성 시에만 검사합니다.
    """

    email: Optional[EmailStr] = None
    dni: Optional[str] = Field(default=None, min_length=1, max_length=64)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    surname: Optional[str] = Field(default=None, min_length=1, max_length=255)
    age: Optional[int] = Field(default=None, ge=0)
    picture: Optional[str] = Field(default=None, max_length=2048)
    description: Optional[str] = None
    departments: Optional[list[str]] = None
    removed: Optional[bool] = None


class UserResponse(BaseSchema, TimestampMixin):
    """사용자 응답 스키마"""

    id: uuid.UUID
    name: str
    surname: str
    email: str
    dni: str
    age: int
    picture: Optional[str] = None
    description: Optional[str] = None
    departments: list[str] = Field(default_factory=list)
    removed: Optional[bool] = None
