"""活動記錄服務 (Activity Logging Service)"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.models.activity import Activity, ActivityType


class ActivityService:
    """活動記錄服務"""

    async def log_activity(
        self,
        db: AsyncSession,
        activity_type: ActivityType | str,
        description: str,
        row_id: Optional[int] = None,
    ) -> Activity:
        """記錄活動

        Args:
            db: 資料庫 Session
            activity_type: 活動類型
            description: 描述
            row_id: 關聯資料列或留言 ID

        Returns:
            Activity: 活動記錄物件
        """
        if isinstance(activity_type, str):
            activity_type = ActivityType(activity_type)

        activity = Activity(
            activity_type=activity_type,
            description=description[:500],
            row_id=row_id,
        )

        db.add(activity)
        # 使用 flush 而非 commit，讓調用者控制事務
        await db.flush()

        return activity


# 建立全域活動記錄服務實例
activity_service = ActivityService()
