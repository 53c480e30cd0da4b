"""Pydantic Schemas - 用於 API 請求/響應的資料驗證"""

from typing import Optional
from pydantic import BaseModel

from era_admin.schemas.activity import ActivityListItem, ActivityListResponse
from era_admin.schemas.block import (
    BlockAddDepartment,
    BlockAddDepartmentResponse,
    BlockDepartment,
    BlockRename,
    BlockRenameResponse,
    BlockResponse,
)
from era_admin.schemas.comment import (
    GeneralCommentCreate,
    GeneralCommentResponse,
    PersonnelCommentCreate,
    PersonnelCommentResponse,
)
from era_admin.schemas.department import (
    DepartmentCheckResponse,
    DepartmentNameItem,
    DepartmentPayload,
    DepartmentResponse,
)
from era_admin.schemas.era_row import EraRowPayload, EraRowResponse
from era_admin.schemas.legacy import LegacyDepartmentRecord
from era_admin.schemas.personnel import PersonnelPayload, PersonnelResponse


class MessageResponse(BaseModel):
    """通用訊息響應"""
    message: str
    detail: Optional[str] = None


class ImageListResponse(BaseModel):
    """圖片列表響應"""
    images: list[str]


__all__ = [
    "ActivityListItem",
    "ActivityListResponse",
    "BlockAddDepartment",
    "BlockAddDepartmentResponse",
    "BlockDepartment",
    "BlockRename",
    "BlockRenameResponse",
    "BlockResponse",
    "DepartmentCheckResponse",
    "DepartmentNameItem",
    "DepartmentPayload",
    "DepartmentResponse",
    "EraRowPayload",
    "EraRowResponse",
    "GeneralCommentCreate",
    "GeneralCommentResponse",
    "ImageListResponse",
    "LegacyDepartmentRecord",
    "MessageResponse",
    "PersonnelCommentCreate",
    "PersonnelCommentResponse",
    "PersonnelPayload",
    "PersonnelResponse",
]
