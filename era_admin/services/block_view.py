"""區塊檢視 (Block View)

區塊沒有自己的資料表，每次讀取時依 block 欄位將處室資料列分組。
"""

from typing import Optional

from loguru import logger
from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.config import settings
from era_admin.core.exceptions import NotFoundError, ValidationError
from era_admin.models.activity import ActivityType
from era_admin.models.era_row import EraRow
from era_admin.services.activity import activity_service
from era_admin.services.department_view import department_condition, department_view
from era_admin.services.row_store import is_blank, row_store


def block_label(value: Optional[str]) -> str:
    """空白 block 顯示為預設標籤"""
    return settings.UNKNOWN_BLOCK_LABEL if is_blank(value) else value


class BlockView:
    """區塊的分組與調整規則"""

    async def list_blocks(self, db: AsyncSession) -> list[dict]:
        rows = await row_store.list_rows(db, department_condition())

        # dict 保留插入順序 → 區塊依第一次出現的資料列排序
        blocks: dict[str, dict] = {}
        for row in rows:
            if is_blank(row.department):
                continue
            name = block_label(row.block)
            block = blocks.setdefault(name, {
                "id": name,
                "name": name,
                "description": "",
                "departments": [],
            })
            if not block["description"] and not is_blank(row.description):
                block["description"] = row.description
            block["departments"].append({
                "id": row.id,
                "name": row.department,
                "building": name,
                "floor": row.floor or "",
                "officeNumber": row.officeno or "",
            })
        return list(blocks.values())

    async def rename(
        self,
        db: AsyncSession,
        old_name: str,
        new_name: Optional[str],
        description: Optional[str] = None,
    ) -> int:
        """以單一 UPDATE 敘述將所有 block == old_name 的資料列改名

        Returns:
            int: 更新的資料列數
        """
        if is_blank(old_name) or is_blank(new_name):
            raise ValidationError("Block ID and name are required")

        if old_name == settings.UNKNOWN_BLOCK_LABEL:
            condition = or_(
                EraRow.block.is_(None),
                func.trim(EraRow.block) == "",
                EraRow.block == old_name,
            )
        else:
            condition = EraRow.block == old_name

        count = await row_store.bulk_update(
            db,
            [condition],
            {"block": new_name, "description": description},
        )
        if count == 0:
            await db.rollback()
            raise NotFoundError(f"Block '{old_name}' not found")

        await activity_service.log_activity(
            db,
            ActivityType.RENAME_BLOCK,
            f"Renamed block {old_name} to {new_name} ({count} rows)",
        )
        await row_store.commit(db)
        logger.info("Block renamed: {} -> {} ({} rows)", old_name, new_name, count)
        return count

    async def add_department(
        self,
        db: AsyncSession,
        block_name: Optional[str],
        department: Optional[str],
    ) -> tuple[EraRow, bool]:
        """將處室加入區塊

        已存在 → 只更新該列的 block（等同搬遷，原區塊不再包含此處室）
        不存在 → 以預設樓層與辦公室編號建立新處室

        Returns:
            tuple: (資料列, 是否為新建)
        """
        if is_blank(block_name) or is_blank(department):
            raise ValidationError("Block name and department are required")

        check = await department_view.exists(db, department)
        if check["exists"]:
            row = await department_view.relocate(db, check["id"], block_name)
            return row, False

        row = await department_view.create(
            db,
            name=department,
            floor=settings.DEFAULT_FLOOR,
            office_no=settings.DEFAULT_OFFICE_NO,
            building=block_name,
        )
        return row, True


# 建立全域區塊檢視實例
block_view = BlockView()
