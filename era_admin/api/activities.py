"""活動記錄 API 路由"""

import math
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.database import get_db
from era_admin.core.exceptions import ValidationError
from era_admin.models.activity import Activity, ActivityType
from era_admin.schemas import ActivityListItem, ActivityListResponse

router = APIRouter(prefix="/activities", tags=["活動記錄"])


@router.get("", response_model=ActivityListResponse)
async def get_activities(
    page: int = Query(1, ge=1, description="頁碼"),
    limit: int = Query(20, ge=1, le=100, description="每頁數量"),
    activity_type: Optional[str] = Query(None, description="活動類型篩選"),
    row_id: Optional[int] = Query(None, description="資料列 ID 篩選"),
    db: AsyncSession = Depends(get_db)
):
    """取得活動記錄列表（最新的在前）

    - 支援分頁
    - 支援依類型、資料列篩選
    """
    query = select(Activity)

    # 活動類型篩選
    if activity_type:
        try:
            type_enum = ActivityType(activity_type)
        except ValueError:
            raise ValidationError("Invalid activity type")
        query = query.where(Activity.activity_type == type_enum)

    if row_id is not None:
        query = query.where(Activity.row_id == row_id)

    # 計算總數
    count_query = select(func.count()).select_from(query.subquery())
    total = await db.scalar(count_query) or 0

    # 排序和分頁
    query = query.order_by(desc(Activity.created_at), desc(Activity.id))
    query = query.offset((page - 1) * limit).limit(limit)

    result = await db.execute(query)
    activities = result.scalars().all()

    items = [
        ActivityListItem(
            id=activity.id,
            activity_type=activity.activity_type.value,
            description=activity.description,
            row_id=activity.row_id,
            created_at=activity.created_at,
        )
        for activity in activities
    ]

    return ActivityListResponse(
        items=items,
        total=total,
        page=page,
        pages=math.ceil(total / limit) if total > 0 else 0
    )
