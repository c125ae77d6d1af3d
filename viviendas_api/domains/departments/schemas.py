"""Departments 도메인 스키마 정의"""

import uuid
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from viviendas_api.core.schemas import BaseSchema, TimestampMixin


class DepartmentCreate(BaseModel):
    """주거 단위 생성 요청 스키마"""

    type: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=255)
    district: str = Field(..., min_length=1, max_length=255)
    floor: Optional[Union[int, str]] = None
    department: Optional[str] = Field(default=None, max_length=50)
    flat_rooms: Optional[int] = Field(default=None, ge=0)

    @field_validator("floor")
    @classmethod
    def normalize_floor(cls, v: Optional[Union[int, str]]) -> Optional[str]:
        # 층수는 숫자 또는 문자열("PB", "3A")로 올 수 있음
        return None if v is None else str(v)


class DepartmentUpdate(BaseModel):
    """주거 단위 수정 요청 스키마 (전달된 필드만 병합, null 무시)"""

    type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    location: Optional[str] = Field(default=None, min_length=1, max_length=255)
    district: Optional[str] = Field(default=None, min_length=1, max_length=255)
    floor: Optional[Union[int, str]] = None
    department: Optional[str] = Field(default=None, max_length=50)
    flat_rooms: Optional[int] = Field(default=None, ge=0)
    removed: Optional[bool] = None

    @field_validator("floor")
    @classmethod
    def normalize_floor(cls, v: Optional[Union[int, str]]) -> Optional[str]:
        # 층수는 숫자 또는 문자열("PB", "3A")로 올 수 있음
        return None if v is None else str(v)


class DepartmentResponse(BaseSchema, TimestampMixin):
    """주거 단위 응답 스키마"""

    id: uuid.UUID
    type: str
    location: str
    district: str
    floor: Optional[str] = None
    department: Optional[str] = None
    flat_rooms: Optional[int] = None
    removed: Optional[bool] = None
