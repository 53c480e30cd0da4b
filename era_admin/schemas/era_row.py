"""原始資料列 Schemas"""

from typing import Optional
from pydantic import AliasChoices, ConfigDict, Field

from era_admin.schemas.base import RequestModel, TextModel


class EraRowFields(TextModel):
    block: Optional[str] = None
    description: Optional[str] = None
    decat: Optional[int] = None
    department: Optional[str] = None
    departmentamh: Optional[str] = None
    floor: Optional[str] = None
    officeno: Optional[str] = None
    wid: Optional[str] = None
    wname: Optional[str] = None
    wnameamh: Optional[str] = None
    wtitle: Optional[str] = None
    wtitleamh: Optional[str] = None
    wcontact: Optional[str] = None
    photo_url: Optional[str] = None


class EraRowPayload(RequestModel, EraRowFields):
    """新增 / 合併更新資料列（只寫入有提供的欄位）"""
    photo_url: Optional[str] = Field(None, validation_alias=AliasChoices("photo_url", "photo"))


class EraRowResponse(EraRowFields):
    """完整資料列"""
    id: int

    model_config = ConfigDict(from_attributes=True)
