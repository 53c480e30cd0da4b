"""人員相關的 Pydantic Schemas"""

from typing import Optional
from pydantic import AliasChoices, Field

from era_admin.schemas.base import RequestModel, TextModel


class PersonnelPayload(RequestModel):
    """建立 / 更新人員"""
    wname: Optional[str] = Field(None, description="姓名")
    wnameamh: Optional[str] = Field(None, description="姓名（阿姆哈拉語）")
    wtitle: Optional[str] = Field(None, description="職稱")
    wtitleamh: Optional[str] = Field(None, description="職稱（阿姆哈拉語）")
    wcontact: Optional[str] = Field(None, description="聯絡方式")
    department: Optional[str] = Field(None, description="所屬處室")
    photo: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("photo", "photo_url"),
        description="照片：data:image/...;base64 或既有路徑"
    )


class PersonnelResponse(TextModel):
    """人員響應"""
    id: int
    wname: Optional[str] = None
    wnameamh: Optional[str] = None
    wtitle: Optional[str] = None
    wtitleamh: Optional[str] = None
    wcontact: Optional[str] = None
    department: Optional[str] = None
    departmentamh: Optional[str] = None
    photo_url: Optional[str] = None
