"""人員檢視 (Personnel View)

人員是 era_data 中 wname 不為空的資料列。刪除人員只清空
wname / wnameamh / photo_url，同列的處室欄位與 wtitle、wcontact 保留。
"""

from typing import Optional

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.exceptions import StoreError, ValidationError
from era_admin.models.activity import ActivityType
from era_admin.models.era_row import DEPARTMENT_FIELDS, EraRow, PERSONNEL_CLEARED_FIELDS
from era_admin.services.activity import activity_service
from era_admin.services.photo_storage import is_data_uri, photo_storage
from era_admin.services.row_store import is_blank, row_store

# 人員以外的位置欄位，建立人員時一律為 None
_EMPTY_LOCATION = {field: None for field in DEPARTMENT_FIELDS if field != "department"}

# 表示「請求中沒有照片欄位」，更新時保留原照片
UNSET = object()


def to_personnel(row: EraRow) -> dict:
    """資料列投影為人員"""
    return {
        "id": row.id,
        "wname": row.wname,
        "wnameamh": row.wnameamh,
        "wtitle": row.wtitle,
        "wtitleamh": row.wtitleamh,
        "wcontact": row.wcontact,
        "department": row.department,
        "departmentamh": row.departmentamh,
        "photo_url": row.photo_url,
    }


def _require_fields(wname: Optional[str], wtitle: Optional[str], department: Optional[str]) -> None:
    if any(is_blank(value) for value in (wname, wtitle, department)):
        raise ValidationError("Name, title, and department are required")


def _discard_new_photo(photo, photo_url: Optional[str]) -> None:
    # 只刪除這次請求剛存下的檔案
    if is_data_uri(photo):
        photo_storage.discard(photo_url)


class PersonnelView:
    """人員的讀寫規則"""

    async def list_personnel(self, db: AsyncSession) -> list[dict]:
        # 不過濾空白姓名，由前端處理
        rows = await row_store.list_rows(db)
        return [to_personnel(row) for row in rows]

    async def create(
        self,
        db: AsyncSession,
        wname: Optional[str],
        wtitle: Optional[str],
        department: Optional[str],
        wnameamh: Optional[str] = None,
        wtitleamh: Optional[str] = None,
        wcontact: Optional[str] = None,
        photo: Optional[str] = None,
    ) -> EraRow:
        _require_fields(wname, wtitle, department)
        photo_url = await photo_storage.resolve(photo, wname)

        try:
            row = await row_store.insert(
                db,
                wname=wname,
                wnameamh=wnameamh or None,
                wtitle=wtitle,
                wtitleamh=wtitleamh or None,
                wcontact=wcontact or None,
                department=department,
                photo_url=photo_url,
                **_EMPTY_LOCATION,
            )
            await activity_service.log_activity(
                db,
                ActivityType.CREATE_PERSONNEL,
                f"Created personnel {wname} ({department})",
                row_id=row.id,
            )
            await row_store.commit(db)
        except StoreError:
            _discard_new_photo(photo, photo_url)
            raise
        logger.info("Personnel created: {} (id={})", wname, row.id)
        return row

    async def update(
        self,
        db: AsyncSession,
        row_id: int,
        wname: Optional[str],
        wtitle: Optional[str],
        department: Optional[str],
        wnameamh: Optional[str] = None,
        wtitleamh: Optional[str] = None,
        wcontact: Optional[str] = None,
        photo=UNSET,
    ) -> EraRow:
        """覆寫人員欄位

        photo:
            - data URI: 重新存檔並更新參照
            - 一般字串: 原樣寫入
            - None / "": 清除照片
            - UNSET（請求未帶此欄位）: 保留原照片
        """
        _require_fields(wname, wtitle, department)
        row = await row_store.require(db, row_id, "Personnel")

        fields = {
            "wname": wname,
            "wnameamh": wnameamh or None,
            "wtitle": wtitle,
            "wtitleamh": wtitleamh or None,
            "wcontact": wcontact or None,
            "department": department,
        }
        if photo is not UNSET:
            fields["photo_url"] = await photo_storage.resolve(photo, wname)

        if row.department != department and not is_blank(row.department) and not is_blank(row.floor):
            # 同列同時是處室時，改人員的處室等於改處室本身
            logger.warning(
                "Personnel update on row {} renames co-located department {} -> {}",
                row_id, row.department, department,
            )

        try:
            await row_store.update_fields(db, row, **fields)
            await activity_service.log_activity(
                db,
                ActivityType.UPDATE_PERSONNEL,
                f"Updated personnel {wname} ({department})",
                row_id=row.id,
            )
            await row_store.commit(db)
        except StoreError:
            _discard_new_photo(photo, fields.get("photo_url"))
            raise
        logger.info("Personnel updated: {} (id={})", wname, row.id)
        return row

    async def soft_delete(self, db: AsyncSession, row_id: int) -> EraRow:
        """只清空 wname / wnameamh / photo_url"""
        row = await row_store.require(db, row_id, "Personnel")
        name = row.wname

        await row_store.update_fields(db, row, **{field: None for field in PERSONNEL_CLEARED_FIELDS})
        await activity_service.log_activity(
            db,
            ActivityType.DELETE_PERSONNEL,
            f"Cleared personnel {name}",
            row_id=row.id,
        )
        await row_store.commit(db)
        logger.info("Personnel cleared: {} (id={})", name, row.id)
        return row


# 建立全域人員檢視實例
personnel_view = PersonnelView()
