"""目錄資料列存取服務 (Row Store)

era_data 的所有讀寫都經過這裡。各個 View（處室 / 人員 / 區塊）只決定
要讀寫哪些欄位，不直接操作 SQL。
"""

from typing import Any, Iterable, Optional

from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.exceptions import NotFoundError, StoreError
from era_admin.models.era_row import EraRow, ROW_FIELDS


def is_blank(value: Any) -> bool:
    """None 或只有空白的字串視為空值"""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def row_to_dict(row: EraRow) -> dict:
    """將資料列轉為完整欄位字典"""
    data = {"id": row.id}
    for field in ROW_FIELDS:
        data[field] = getattr(row, field)
    return data


class RowStore:
    """era_data 存取服務"""

    async def _execute(self, db: AsyncSession, statement):
        try:
            return await db.execute(statement)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception("Row store statement failed")
            raise StoreError("Database operation failed") from e

    async def get(self, db: AsyncSession, row_id: int) -> Optional[EraRow]:
        result = await self._execute(db, select(EraRow).where(EraRow.id == row_id))
        return result.scalar_one_or_none()

    async def require(self, db: AsyncSession, row_id: int, label: str = "Record") -> EraRow:
        """取得資料列，不存在時拋出 NotFoundError"""
        row = await self.get(db, row_id)
        if row is None:
            raise NotFoundError(f"{label} not found")
        return row

    async def list_rows(self, db: AsyncSession, *conditions) -> list[EraRow]:
        query = select(EraRow)
        if conditions:
            query = query.where(*conditions)
        result = await self._execute(db, query.order_by(EraRow.id))
        return list(result.scalars().all())

    async def find_first_by(self, db: AsyncSession, field: str, value: Any) -> Optional[EraRow]:
        """依欄位完全相符取得第一筆（id 最小）"""
        column = getattr(EraRow, field)
        result = await self._execute(
            db,
            select(EraRow).where(column == value).order_by(EraRow.id).limit(1)
        )
        return result.scalar_one_or_none()

    async def insert(self, db: AsyncSession, **fields) -> EraRow:
        unknown = set(fields) - set(ROW_FIELDS)
        if unknown:
            raise ValueError(f"Unknown era_data fields: {', '.join(sorted(unknown))}")

        row = EraRow(**fields)
        db.add(row)
        try:
            await db.flush()  # 先 flush 以取得 row.id
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception("Row insert failed")
            raise StoreError("Could not insert record") from e
        return row

    async def update_fields(self, db: AsyncSession, row: EraRow, **fields) -> EraRow:
        for field, value in fields.items():
            if field not in ROW_FIELDS:
                raise ValueError(f"Unknown era_data field: {field}")
            setattr(row, field, value)
        try:
            await db.flush()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception("Row update failed (id={})", row.id)
            raise StoreError("Could not update record") from e
        return row

    async def delete(self, db: AsyncSession, row: EraRow) -> None:
        try:
            await db.delete(row)
            await db.flush()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception("Row delete failed (id={})", row.id)
            raise StoreError("Could not delete record") from e

    async def bulk_update(self, db: AsyncSession, where: Iterable, values: dict) -> int:
        """以單一 UPDATE 敘述更新所有符合條件的資料列，回傳影響筆數"""
        statement = (
            update(EraRow)
            .where(*where)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute(db, statement)
        return result.rowcount or 0

    async def commit(self, db: AsyncSession) -> None:
        """提交交易；失敗時回滾，資料維持原狀"""
        try:
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception("Commit failed, transaction rolled back")
            raise StoreError("Could not save changes") from e


# 建立全域資料列存取服務實例
row_store = RowStore()
