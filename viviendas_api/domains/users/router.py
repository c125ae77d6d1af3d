"""Users 도메인 라우터

/usuarios 엔드포인트입니다. 삭제 경로는 단수형 /usuario/{id} 이며,
/usuarios/{id} 도 같은 동작으로 허용합니다.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from viviendas_api.core.database import get_db
from viviendas_api.core.schemas import ERROR_RESPONSES, ErrorResponse
from viviendas_api.core.utils.pagination import PageParams
from viviendas_api.domains.users.query import UserFilters, extract_field_filters
from viviendas_api.domains.users.schemas import (
    UserCreate,
    UserResponse,
    UserUpdate,
)
from viviendas_api.domains.users.service import UserService

router = APIRouter(responses=ERROR_RESPONSES)


def get_user_service(session: AsyncSession = Depends(get_db)) -> UserService:
    """UserService 의존성"""
    return UserService(session)


@router.get("/usuarios", response_model=list[UserResponse])
async def list_users(
    request: Request,
    age: Optional[int] = Query(None, description="나이 일치"),
    min_age: Optional[int] = Query(None, alias="minAge", description="최소 나이"),
    max_age: Optional[int] = Query(None, alias="maxAge", description="최대 나이"),
    search: Optional[str] = Query(
        None, description="name, email, surname 부분 일치 검색"
    ),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="정렬 필드"),
    order: str = Query("asc", description="asc 또는 desc"),
    page_params: PageParams = Depends(),
    service: UserService = Depends(get_user_service),
):
    """사용자 목록 조회

    그 외 쿼리 파라미터(name, surname, email, dni, picture, description)는
    해당 필드의 부분 일치 필터로 적용됩니다.
    """
    filters = UserFilters(
        age=age,
        min_age=min_age,
        max_age=max_age,
        search=search,
        fields=extract_field_filters(request.query_params.items()),
        sort_by=sort_by,
        order=order,
    )
    users = await service.get_users(
        filters, skip=page_params.skip, limit=page_params.limit
    )
    return [UserResponse.model_validate(user) for user in users]


@router.get("/usuarios/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: uuid.UUID,
    service: UserService = Depends(get_user_service),
):
    """사용자 상세 조회"""
    user = await service.get_user(user_id)
    return UserResponse.model_validate(user)


@router.post(
    "/usuarios",
    response_model=UserResponse,
    status_code=201,
    responses={
        409: {"model": ErrorResponse, "description": "email o dni duplicado"}
    },
)
async def create_user(
    user_data: UserCreate,
    service: UserService = Depends(get_user_service),
):
    """사용자 생성"""
    user = await service.create_user(user_data)
    return UserResponse.model_validate(user)


@router.delete("/usuario/{user_id}", status_code=204)
@router.delete("/usuarios/{user_id}", status_code=204, include_in_schema=False)
async def delete_user(
    user_id: uuid.UUID,
    service: UserService = Depends(get_user_service),
):
    """사용자 삭제 (Soft Delete)"""
    await service.delete_user(user_id)
    return Response(status_code=204)


@router.put("/usuarios/{user_id}/editar", response_model=UserResponse)
async def update_user(
    user_id: uuid.UUID,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """사용자 수정"""
    user = await service.update_user(user_id, user_data)
    return UserResponse.model_validate(user)
