"""API 라우터"""

from typing import Any

from fastapi import APIRouter

from viviendas_api.core.schemas import APIResponse
from viviendas_api.domains.departments.router import router as departments_router
from viviendas_api.domains.users.router import router as users_router

api_router = APIRouter()

# 도메인 라우터 등록 (경로는 각 라우터에 정의됨)
api_router.include_router(users_router, tags=["Usuarios"])
api_router.include_router(departments_router, tags=["Viviendas"])


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_root():
    """API 루트 엔드포인트 (리소스 목록)"""
    return APIResponse(
        success=True,
        message="Viviendas API",
        data={
            "resources": ["/usuarios", "/viviendas"],
            "docs": "/docs",
        },
    )
