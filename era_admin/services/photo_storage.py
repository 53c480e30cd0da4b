"""照片儲存服務 (Photo Storage Service)"""

import base64
import binascii
import re
import time
from pathlib import Path
from typing import Optional

import aiofiles
from loguru import logger

from era_admin.config import settings
from era_admin.core.exceptions import StoreError, ValidationError

DATA_URI_PATTERN = re.compile(r"^data:image/(?P<subtype>[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)

# MIME 子類型對應副檔名
_EXTENSIONS = {
    "png": "png",
    "jpeg": "jpg",
    "jpg": "jpg",
    "gif": "gif",
    "webp": "webp",
}


def is_data_uri(value: Optional[str]) -> bool:
    return isinstance(value, str) and value.startswith("data:image")


class PhotoStorageService:
    """照片儲存服務"""

    def __init__(self, upload_dir: str | Path | None = None, images_dir: str | Path | None = None):
        self.base_path = Path(upload_dir or settings.UPLOAD_DIR)
        self.images_path = Path(images_dir or settings.IMAGES_DIR)
        self.url_prefix = settings.UPLOAD_URL_PREFIX.rstrip("/")

    def generate_filename(self, owner_name: str, extension: str) -> str:
        """生成檔名

        格式: <毫秒時間戳>-<姓名（空白改為 -）>.<副檔名>
        例如: 1717000000000-Abebe-Kebede.png
        """
        safe_name = re.sub(r"\s+", "-", owner_name.strip())
        safe_name = "".join(c for c in safe_name if c.isalnum() or c in ("-", "_", "."))
        return f"{int(time.time() * 1000)}-{safe_name or 'photo'}.{extension}"

    async def save_data_uri(self, data_uri: str, owner_name: str) -> str:
        """解碼 data URI 並寫入上傳目錄

        Returns:
            str: 照片參照路徑（例如 /uploads/1717000000000-Abebe.png）
        """
        match = DATA_URI_PATTERN.match(data_uri)
        if not match:
            raise ValidationError("Photo must be a base64 encoded image data URI")

        try:
            content = base64.b64decode(match.group("payload"), validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValidationError("Photo data is not valid base64") from e
        if not content:
            raise ValidationError("Photo data is empty")

        extension = _EXTENSIONS.get(match.group("subtype").lower(), "png")
        filename = self.generate_filename(owner_name, extension)

        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self.base_path / filename, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.exception("Could not write photo {}", filename)
            raise StoreError("Could not save photo") from e

        logger.info("Photo saved: {} ({} bytes)", filename, len(content))
        return f"{self.url_prefix}/{filename}"

    async def resolve(self, photo: Optional[str], owner_name: str) -> Optional[str]:
        """data URI → 存檔後回傳參照；其他字串原樣回傳；空值回傳 None"""
        if photo is None or (isinstance(photo, str) and photo.strip() == ""):
            return None
        if is_data_uri(photo):
            return await self.save_data_uri(photo, owner_name)
        return photo

    def discard(self, reference: Optional[str]) -> None:
        """刪除由 save_data_uri 寫入的照片；其他參照不處理"""
        if not reference or not reference.startswith(f"{self.url_prefix}/"):
            return
        path = self.base_path / reference[len(self.url_prefix) + 1:]
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.exception("Could not remove photo {}", path)
            return
        logger.info("Photo removed: {}", path.name)

    def list_images(self) -> list[str]:
        """列出圖片目錄中符合副檔名的檔案"""
        if not self.images_path.is_dir():
            return []
        allowed = settings.image_extensions_list
        return sorted(
            entry.name
            for entry in self.images_path.iterdir()
            if entry.is_file() and entry.suffix.lower() in allowed
        )


# 建立全域照片儲存服務實例
photo_storage = PhotoStorageService()
