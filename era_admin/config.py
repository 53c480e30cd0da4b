"""應用程式配置管理"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """應用程式設定"""

    # 應用設定
    APP_NAME: str = "ERA Wayfinding Admin"
    DEBUG: bool = False  # 設為 True 會輸出 SQL
    API_V1_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # 資料庫（單一 SQLite 檔案）
    DATABASE_URL: str = "sqlite+aiosqlite:///./era.db"
    DB_POOL_SIZE: int = 5  # 僅用於非 SQLite 連線
    DB_MAX_OVERFLOW: int = 10

    # 照片與圖片
    UPLOAD_DIR: str = "./public/uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    IMAGES_DIR: str = "./public/era_Images"
    IMAGES_URL_PREFIX: str = "/era_Images"
    IMAGE_EXTENSIONS: str = ".jpg,.jpeg,.png,.gif"

    # 舊版 CSV 處室資料
    LEGACY_CSV_PATH: str = "./era.csv"

    # 區塊 / 處室預設值
    UNKNOWN_BLOCK_LABEL: str = "Unknown Block"
    DEFAULT_FLOOR: str = "1"
    DEFAULT_OFFICE_NO: str = "1"

    # 留言
    DEFAULT_COMMENT_CATEGORY: str = "general"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """將 CORS_ORIGINS 字串轉換為列表"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def image_extensions_list(self) -> List[str]:
        """將 IMAGE_EXTENSIONS 字串轉換為小寫列表"""
        return [ext.strip().lower() for ext in self.IMAGE_EXTENSIONS.split(",") if ext.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


# 建立全域設定實例
settings = Settings()
