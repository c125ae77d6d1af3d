"""Departments 도메인 라우터 (/viviendas)"""

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from viviendas_api.core.database import get_db
from viviendas_api.core.schemas import ERROR_RESPONSES
from viviendas_api.domains.departments.schemas import (
    DepartmentCreate,
    DepartmentResponse,
    DepartmentUpdate,
)
from viviendas_api.domains.departments.service import DepartmentService

router = APIRouter(prefix="/viviendas", responses=ERROR_RESPONSES)


def get_department_service(
    session: AsyncSession = Depends(get_db),
) -> DepartmentService:
    """DepartmentService 의존성"""
    return DepartmentService(session)


@router.get("", response_model=list[DepartmentResponse])
async def list_departments(
    service: DepartmentService = Depends(get_department_service),
):
    """주거 단위 목록 조회"""
    departments = await service.get_departments()
    return [DepartmentResponse.model_validate(d) for d in departments]


@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(
    department_id: uuid.UUID,
    service: DepartmentService = Depends(get_department_service),
):
    """주거 단위 상세 조회"""
    department = await service.get_department(department_id)
    return DepartmentResponse.model_validate(department)


@router.post("", response_model=DepartmentResponse, status_code=201)
async def create_department(
    data: DepartmentCreate,
    service: DepartmentService = Depends(get_department_service),
):
    """주거 단위 생성"""
    department = await service.create_department(data)
    return DepartmentResponse.model_validate(department)


@router.delete("/{department_id}", status_code=204)
async def delete_department(
    department_id: uuid.UUID,
    service: DepartmentService = Depends(get_department_service),
):
    """주거 단위 삭제 (Soft Delete)"""
    await service.delete_department(department_id)
    return Response(status_code=204)


@router.put("/{department_id}/editar", response_model=DepartmentResponse)
async def update_department(
    department_id: uuid.UUID,
    data: DepartmentUpdate,
    service: DepartmentService = Depends(get_department_service),
):
    """주거 단위 수정"""
    department = await service.update_department(department_id, data)
    return DepartmentResponse.model_validate(department)
