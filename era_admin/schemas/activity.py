"""活動記錄相關的 Pydantic Schema"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class ActivityListItem(BaseModel):
    """活動記錄列表項目"""
    id: int
    activity_type: str
    description: str
    row_id: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ActivityListResponse(BaseModel):
    """活動記錄列表回應"""
    items: list[ActivityListItem]
    total: int
    page: int
    pages: int
