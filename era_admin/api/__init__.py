"""API 路由總入口"""

from fastapi import APIRouter
from era_admin.api import activities, blocks, comments, departments, era_data, images, legacy, personnel

# 建立 API 路由器
api_router = APIRouter()


# 健康檢查端點
@api_router.get("/health", tags=["系統"])
async def health_check():
    """API 健康檢查"""
    return {
        "status": "healthy",
        "message": "API is running"
    }


# 註冊各模組路由
api_router.include_router(departments.router)
api_router.include_router(personnel.router)
api_router.include_router(blocks.router)
api_router.include_router(comments.router)
api_router.include_router(era_data.router)
api_router.include_router(images.router)
api_router.include_router(legacy.router)
api_router.include_router(activities.router)

__all__ = ["api_router"]
