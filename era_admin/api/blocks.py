"""區塊管理 API 路由"""

from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.database import get_db
from era_admin.schemas import (
    BlockAddDepartment,
    BlockAddDepartmentResponse,
    BlockRename,
    BlockRenameResponse,
    BlockResponse,
)
from era_admin.services.block_view import block_label, block_view

router = APIRouter(prefix="/blocks", tags=["區塊管理"])


@router.get("", response_model=List[BlockResponse], summary="取得區塊列表")
async def list_blocks(db: AsyncSession = Depends(get_db)):
    """
    依 block 欄位將處室分組

    block 為空的處室歸入 "Unknown Block"
    """
    return await block_view.list_blocks(db)


@router.put("/{block_id}", response_model=BlockRenameResponse, summary="區塊改名")
async def rename_block(
    block_id: str,
    payload: BlockRename,
    db: AsyncSession = Depends(get_db)
):
    """
    將所有 block 等於 block_id 的資料列改為新名稱與描述（單一交易）
    """
    count = await block_view.rename(db, block_id, payload.name, payload.description)
    return BlockRenameResponse(
        message="Block updated successfully",
        id=block_id,
        name=payload.name,
        description=payload.description,
        updated_rows=count,
    )


@router.post(
    "/{block_id}/departments",
    response_model=BlockAddDepartmentResponse,
    summary="將處室加入區塊"
)
async def add_department_to_block(
    block_id: str,
    payload: BlockAddDepartment,
    db: AsyncSession = Depends(get_db)
):
    """
    將處室加入區塊

    - 處室已存在：只更新其 block（從原區塊移出）→ 200
    - 處室不存在：以樓層 1、辦公室 1 建立 → 201
    """
    row, created = await block_view.add_department(db, block_id, payload.department)
    body = BlockAddDepartmentResponse(
        created=created,
        department={
            "id": row.id,
            "name": row.department,
            "building": block_label(row.block),
            "floor": row.floor or "",
            "officeNumber": row.officeno or "",
        },
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        content=body.model_dump(by_alias=True),
    )
