"""留言相關的 Pydantic Schemas"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from era_admin.schemas.base import RequestModel


class GeneralCommentCreate(RequestModel):
    """新增一般留言"""
    comment: Optional[str] = Field(None, description="留言內容")
    comment_type: Optional[str] = Field(None, alias="comment-type", description="Feedback / Issue / Report")
    category: Optional[str] = Field(None, description="分類")
    date: Optional[str] = Field(None, description="日期（預設今天）")


class GeneralCommentResponse(BaseModel):
    """一般留言響應"""
    id: int
    date: Optional[str] = None
    comment_type: Optional[str] = Field(None, alias="comment-type")
    comment: Optional[str] = None
    category: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class PersonnelCommentCreate(RequestModel):
    """新增人員回饋"""
    department: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    feedback_date: Optional[str] = Field(None, description="日期（預設今天）")
    feedback_text: Optional[str] = None


class PersonnelCommentResponse(BaseModel):
    """人員回饋響應"""
    id: int
    department: Optional[str] = None
    title: Optional[str] = None
    name: Optional[str] = None
    feedback_date: Optional[str] = None
    feedback_text: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
