"""處室檢視 (Department View)

處室不是獨立的資料表，而是 era_data 中 department 不為空的資料列。
刪除處室會刪除整列（包含同一列上的人員資料），與人員的軟刪除不同。
"""

from typing import Optional

from loguru import logger
from sqlalchemy import and_
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.exceptions import ConflictError, ValidationError
from era_admin.models.activity import ActivityType
from era_admin.models.era_row import EraRow, PERSONNEL_FIELDS
from era_admin.services.activity import activity_service
from era_admin.services.row_store import is_blank, row_store

# 處室專屬欄位之外的人員欄位，建立處室時一律為 None
_EMPTY_PERSONNEL = {field: None for field in PERSONNEL_FIELDS if field != "department"}


def department_condition():
    """「此列是處室」的查詢條件"""
    return and_(EraRow.department.is_not(None), EraRow.department != "")


def to_department(row: EraRow) -> dict:
    """資料列投影為處室"""
    return {
        "id": row.id,
        "name": row.department,
        "departmentamh": row.departmentamh,
        "block": row.block,
        "floor": row.floor,
        "officeno": row.officeno,
        "officeNumber": row.officeno,
    }


def _require_location_fields(
    name: Optional[str],
    floor: Optional[str],
    office_no: Optional[str],
    building: Optional[str],
) -> None:
    if any(is_blank(value) for value in (name, floor, office_no, building)):
        raise ValidationError("Department name, floor, office number, and building are required")


class DepartmentView:
    """處室的讀寫規則"""

    async def list_departments(self, db: AsyncSession) -> list[dict]:
        rows = await row_store.list_rows(db, department_condition())
        return [to_department(row) for row in rows if not is_blank(row.department)]

    async def exists(self, db: AsyncSession, name: Optional[str]) -> dict:
        """依名稱完全相符檢查處室是否存在，回傳 {exists, id}"""
        if is_blank(name):
            raise ValidationError("Department name is required")
        row = await row_store.find_first_by(db, "department", name)
        return {"exists": row is not None, "id": row.id if row else None}

    async def available(self, db: AsyncSession) -> list[dict]:
        """不重複的處室名稱（每個名稱取 id 最小的一列）"""
        rows = await row_store.list_rows(db, department_condition())
        seen: dict[str, int] = {}
        for row in rows:
            if is_blank(row.department):
                continue
            seen.setdefault(row.department, row.id)
        return [{"name": name, "id": seen[name]} for name in sorted(seen)]

    async def create(
        self,
        db: AsyncSession,
        name: Optional[str],
        floor: Optional[str],
        office_no: Optional[str],
        building: Optional[str],
        name_amh: Optional[str] = None,
    ) -> EraRow:
        """建立處室；同名處室（任一資料列）已存在時拋出 ConflictError"""
        _require_location_fields(name, floor, office_no, building)

        check = await self.exists(db, name)
        if check["exists"]:
            raise ConflictError(f"Department '{name}' already exists")

        row = await row_store.insert(
            db,
            block=building,
            department=name,
            departmentamh=name_amh or None,
            floor=floor,
            officeno=office_no,
            **_EMPTY_PERSONNEL,
        )
        await activity_service.log_activity(
            db,
            ActivityType.CREATE_DEPARTMENT,
            f"Created department {name} in block {building}",
            row_id=row.id,
        )
        await row_store.commit(db)
        logger.info("Department created: {} (id={})", name, row.id)
        return row

    async def update(
        self,
        db: AsyncSession,
        row_id: int,
        name: Optional[str],
        floor: Optional[str],
        office_no: Optional[str],
        building: Optional[str],
        name_amh: Optional[str] = None,
    ) -> EraRow:
        """改名 / 搬遷：覆寫處室欄位，人員欄位不動"""
        _require_location_fields(name, floor, office_no, building)
        row = await row_store.require(db, row_id, "Department")

        previous_block = row.block
        await row_store.update_fields(
            db,
            row,
            department=name,
            departmentamh=name_amh or None,
            floor=floor,
            officeno=office_no,
            block=building,
        )
        await activity_service.log_activity(
            db,
            ActivityType.UPDATE_DEPARTMENT,
            f"Updated department {name} (block {previous_block} -> {building})",
            row_id=row.id,
        )
        await row_store.commit(db)
        logger.info("Department updated: {} (id={})", name, row.id)
        return row

    async def relocate(self, db: AsyncSession, row_id: int, building: str) -> EraRow:
        """只更新 block 欄位"""
        row = await row_store.require(db, row_id, "Department")
        previous_block = row.block
        await row_store.update_fields(db, row, block=building)
        await activity_service.log_activity(
            db,
            ActivityType.ASSIGN_BLOCK,
            f"Moved department {row.department} from block {previous_block} to {building}",
            row_id=row.id,
        )
        await row_store.commit(db)
        logger.info("Department {} moved to block {} (id={})", row.department, building, row.id)
        return row

    async def delete(self, db: AsyncSession, row_id: int) -> str:
        """刪除整列資料（同列的人員資料一併刪除）"""
        row = await row_store.require(db, row_id, "Department")
        name = row.department
        if not is_blank(row.wname):
            logger.warning("Deleting department row {} also removes personnel {}", row_id, row.wname)

        await activity_service.log_activity(
            db,
            ActivityType.DELETE_DEPARTMENT,
            f"Deleted department {name}",
            row_id=row_id,
        )
        await row_store.delete(db, row)
        await row_store.commit(db)
        logger.info("Department deleted: {} (id={})", name, row_id)
        return name


# 建立全域處室檢視實例
department_view = DepartmentView()
