"""舊版 CSV 處室 API 路由

資料存放在 era.csv，與 era_data 資料表無關。
"""

from fastapi import APIRouter, Response, status

from era_admin.schemas import LegacyDepartmentRecord
from era_admin.services.legacy_csv import legacy_csv_store

router = APIRouter(prefix="/legacy/departments", tags=["舊版 CSV 處室"])


@router.get("", summary="取得 CSV 原始內容")
async def get_csv():
    text = await legacy_csv_store.read_text()
    return Response(content=text, media_type="text/csv")


@router.post("", status_code=status.HTTP_201_CREATED, summary="新增 CSV 處室")
async def create_record(record: LegacyDepartmentRecord):
    """
    新增一筆資料，id 由系統以時間戳記指定
    """
    return await legacy_csv_store.create(record.model_dump())


@router.put("/{record_id}", summary="更新 CSV 處室")
async def update_record(record_id: str, changes: LegacyDepartmentRecord):
    """
    依 id 更新（id 會補零到與檔案中相同的長度，例如 1 → 01）
    """
    return await legacy_csv_store.update(record_id, changes.model_dump())


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, summary="刪除 CSV 處室")
async def delete_record(record_id: str):
    await legacy_csv_store.delete(record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
