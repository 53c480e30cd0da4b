"""原始資料列 API 路由

直接讀寫 era_data 的任意欄位，不套用處室 / 人員規則。
"""

from typing import List

from fastapi import APIRouter, Depends, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.database import get_db
from era_admin.models.activity import ActivityType
from era_admin.schemas import EraRowPayload, EraRowResponse, MessageResponse
from era_admin.services.activity import activity_service
from era_admin.services.row_store import row_store, row_to_dict

router = APIRouter(prefix="/era-data", tags=["原始資料"])


@router.get("", response_model=List[EraRowResponse], summary="取得所有資料列")
async def list_rows(db: AsyncSession = Depends(get_db)):
    rows = await row_store.list_rows(db)
    return [row_to_dict(row) for row in rows]


@router.post(
    "",
    response_model=EraRowResponse,
    status_code=status.HTTP_201_CREATED,
    summary="新增資料列"
)
async def create_row(payload: EraRowPayload, db: AsyncSession = Depends(get_db)):
    """
    新增資料列，只寫入請求中提供的欄位
    """
    row = await row_store.insert(db, **payload.model_dump(exclude_unset=True))
    await activity_service.log_activity(
        db,
        ActivityType.CREATE_RECORD,
        f"Added record {row.id}",
        row_id=row.id,
    )
    await row_store.commit(db)
    logger.info("Record created (id={})", row.id)
    return row_to_dict(row)


@router.put("/{row_id}", response_model=EraRowResponse, summary="合併更新資料列")
async def update_row(row_id: int, payload: EraRowPayload, db: AsyncSession = Depends(get_db)):
    """
    將請求中的欄位合併到既有資料列，未提供的欄位保持不變
    """
    row = await row_store.require(db, row_id)
    changes = payload.model_dump(exclude_unset=True)
    await row_store.update_fields(db, row, **changes)
    await activity_service.log_activity(
        db,
        ActivityType.UPDATE_RECORD,
        f"Updated record {row_id}: {', '.join(sorted(changes)) or 'no fields'}",
        row_id=row_id,
    )
    await row_store.commit(db)
    logger.info("Record updated (id={})", row_id)
    return row_to_dict(row)


@router.delete("/{row_id}", response_model=MessageResponse, summary="刪除資料列")
async def delete_row(row_id: int, db: AsyncSession = Depends(get_db)):
    row = await row_store.require(db, row_id)
    await activity_service.log_activity(
        db,
        ActivityType.DELETE_RECORD,
        f"Deleted record {row_id}",
        row_id=row_id,
    )
    await row_store.delete(db, row)
    await row_store.commit(db)
    logger.info("Record deleted (id={})", row_id)
    return MessageResponse(message="Record deleted successfully")
