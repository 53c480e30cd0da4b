"""FastAPI 應用程式主入口"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from era_admin.api import api_router
from era_admin.config import settings
from era_admin.core.database import close_db, init_db
from era_admin.core.exceptions import register_exception_handlers
from era_admin.core.logging import setup_logging

setup_logging()

# 靜態目錄需在掛載前存在
for directory in (settings.UPLOAD_DIR, settings.IMAGES_DIR):
    Path(directory).mkdir(parents=True, exist_ok=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """應用程式生命週期管理"""
    # 啟動時初始化資料庫連線
    await init_db()
    logger.info("{} started", settings.APP_NAME)

    yield

    # 關閉時清理資料庫連線
    await close_db()
    logger.info("{} stopped", settings.APP_NAME)


# 建立 FastAPI 應用程式
app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="ERA 樓層導覽機台目錄管理後端 API",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# 設定 CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# 註冊 API 路由
app.include_router(api_router, prefix=settings.API_V1_PREFIX)

# 上傳照片與預設人員圖片
app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
app.mount(settings.IMAGES_URL_PREFIX, StaticFiles(directory=settings.IMAGES_DIR), name="era_images")


@app.get("/")
async def root():
    """根端點"""
    return {
        "message": "ERA Wayfinding Admin API",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """健康檢查端點"""
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "debug_mode": settings.DEBUG
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "era_admin.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
