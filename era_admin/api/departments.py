"""處室管理 API 路由"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.database import get_db
from era_admin.schemas import (
    DepartmentCheckResponse,
    DepartmentNameItem,
    DepartmentPayload,
    DepartmentResponse,
    MessageResponse,
)
from era_admin.services.department_view import department_view, to_department

router = APIRouter(prefix="/departments", tags=["處室管理"])


@router.get("", response_model=List[DepartmentResponse], summary="取得處室列表")
async def list_departments(db: AsyncSession = Depends(get_db)):
    """
    取得所有處室（department 不為空的資料列）
    """
    return await department_view.list_departments(db)


@router.get("/check", response_model=DepartmentCheckResponse, summary="檢查處室是否存在")
async def check_department(
    name: Optional[str] = Query(None, description="處室名稱（完全相符）"),
    db: AsyncSession = Depends(get_db)
):
    """
    依名稱檢查處室是否存在，回傳第一筆符合的資料列 ID
    """
    return await department_view.exists(db, name)


@router.get("/available", response_model=List[DepartmentNameItem], summary="取得不重複的處室名稱")
async def available_departments(db: AsyncSession = Depends(get_db)):
    return await department_view.available(db)


@router.post(
    "",
    response_model=DepartmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="建立處室"
)
async def create_department(
    payload: DepartmentPayload,
    db: AsyncSession = Depends(get_db)
):
    """
    建立新處室

    - **newDepartment / name**: 處室名稱（唯一）
    - **newDepartmentAmh**: 處室名稱（阿姆哈拉語，可選）
    - **floor**: 樓層
    - **officeNumber**: 辦公室編號
    - **building**: 區塊 / 大樓

    名稱已存在於任一資料列時回傳 409
    """
    row = await department_view.create(
        db,
        name=payload.name,
        name_amh=payload.departmentamh,
        floor=payload.floor,
        office_no=payload.office_number,
        building=payload.building,
    )
    return to_department(row)


@router.put("/{department_id}", response_model=DepartmentResponse, summary="更新處室")
async def update_department(
    department_id: int,
    payload: DepartmentPayload,
    db: AsyncSession = Depends(get_db)
):
    """
    改名或搬遷處室

    會同時改變處室所屬的區塊；同一列上的人員欄位不受影響
    """
    row = await department_view.update(
        db,
        department_id,
        name=payload.name,
        name_amh=payload.departmentamh,
        floor=payload.floor,
        office_no=payload.office_number,
        building=payload.building,
    )
    return to_department(row)


@router.delete("/{department_id}", response_model=MessageResponse, summary="刪除處室")
async def delete_department(
    department_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    刪除處室

    注意：會刪除整筆資料列，同一列上的人員資料也會一併刪除
    """
    name = await department_view.delete(db, department_id)
    return MessageResponse(
        message="Department deleted successfully",
        detail=f"Deleted department: {name}"
    )
