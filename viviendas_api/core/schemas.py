"""공통 API 스키마

리소스 엔드포인트(/usuarios, /viviendas)는 문서 또는 문서 배열을 그대로
반환합니다. 이 모듈의 봉투(envelope) 스키마는 헬스 체크 등 부가
엔드포인트 응답과 에러 응답 문서화에 사용됩니다.
"""

from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """기본 스키마 (ORM 모델 변환용)"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class TimestampMixin(BaseModel):
    """타임스탬프 믹스인"""

    created_at: datetime
    updated_at: Optional[datetime] = None


class APIResponse(BaseModel, Generic[DataT]):
    """단일 데이터 API 응답"""

    success: bool = True
    message: str = "OK"
    data: Optional[DataT] = None


class ErrorDetail(BaseModel):
    """에러 상세 정보"""

    code: str = Field(..., description="에러 코드")
    message: str = Field(..., description="에러 메시지")
    detail: Optional[dict[str, Any]] = Field(default=None, description="추가 정보")


class ErrorResponse(BaseModel):
    """에러 API 응답

    Example::

        {
            "success": false,
            "message": "Recursos no encontrados.",
            "error": {
                "code": "RESOURCES_NOT_FOUND",
                "message": "Recursos no encontrados.",
                "detail": {}
            }
        }
    """

    success: bool = False
    message: str
    error: ErrorDetail


# 라우터 공통 에러 응답 문서
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Error de persistencia"},
    404: {"model": ErrorResponse, "description": "Recurso no encontrado"},
    422: {"model": ErrorResponse, "description": "Datos no válidos"},
    500: {"model": ErrorResponse, "description": "Error interno del servidor"},
}
