"""人員管理 API 路由"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.database import get_db
from era_admin.schemas import MessageResponse, PersonnelPayload, PersonnelResponse
from era_admin.services.personnel_view import UNSET, personnel_view, to_personnel

router = APIRouter(prefix="/personnel", tags=["人員管理"])


@router.get("", response_model=List[PersonnelResponse], summary="取得人員列表")
async def list_personnel(db: AsyncSession = Depends(get_db)):
    """
    取得所有資料列的人員欄位

    不過濾姓名為空的資料列，由前端自行處理
    """
    return await personnel_view.list_personnel(db)


@router.post(
    "",
    response_model=PersonnelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="建立人員"
)
async def create_personnel(
    payload: PersonnelPayload,
    db: AsyncSession = Depends(get_db)
):
    """
    建立人員

    - **wname / wtitle / department**: 必填
    - **photo**: data:image/...;base64 會存檔並改存路徑，其他字串原樣保存
    """
    row = await personnel_view.create(
        db,
        wname=payload.wname,
        wtitle=payload.wtitle,
        department=payload.department,
        wnameamh=payload.wnameamh,
        wtitleamh=payload.wtitleamh,
        wcontact=payload.wcontact,
        photo=payload.photo,
    )
    return to_personnel(row)


@router.put("/{personnel_id}", response_model=PersonnelResponse, summary="更新人員")
async def update_personnel(
    personnel_id: int,
    payload: PersonnelPayload,
    db: AsyncSession = Depends(get_db)
):
    """
    更新人員

    未帶 photo 欄位時保留原照片
    """
    row = await personnel_view.update(
        db,
        personnel_id,
        wname=payload.wname,
        wtitle=payload.wtitle,
        department=payload.department,
        wnameamh=payload.wnameamh,
        wtitleamh=payload.wtitleamh,
        wcontact=payload.wcontact,
        photo=payload.photo if "photo" in payload.model_fields_set else UNSET,
    )
    return to_personnel(row)


@router.delete("/{personnel_id}", response_model=MessageResponse, summary="清除人員資料")
async def delete_personnel(
    personnel_id: int,
    db: AsyncSession = Depends(get_db)
):
    """
    清除人員的姓名與照片（wname / wnameamh / photo_url）

    資料列本身與其處室欄位保留
    """
    await personnel_view.soft_delete(db, personnel_id)
    return MessageResponse(
        message="Personnel data cleared successfully",
        detail=f"Cleared personnel on record {personnel_id}"
    )
