"""圖片列表 API 路由"""

from fastapi import APIRouter

from era_admin.schemas import ImageListResponse
from era_admin.services.photo_storage import photo_storage

router = APIRouter(prefix="/images", tags=["圖片"])


@router.get("", response_model=ImageListResponse, summary="取得人員圖片檔名")
async def list_images():
    """
    列出圖片目錄中的 jpg / jpeg / png / gif 檔案
    """
    return ImageListResponse(images=photo_storage.list_images())
