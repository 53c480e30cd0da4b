"""處室相關的 Pydantic Schemas"""

from typing import Optional
from pydantic import AliasChoices, ConfigDict, Field

from era_admin.schemas.base import RequestModel, TextModel


class DepartmentPayload(RequestModel):
    """建立 / 更新處室

    同時接受管理介面使用的 newDepartment / newDepartmentAmh 欄位名稱。
    必填檢查在服務層進行，以回傳一致的 400 錯誤。
    """
    name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("newDepartment", "name", "department"),
        description="處室名稱"
    )
    departmentamh: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("newDepartmentAmh", "departmentamh", "nameAmh"),
        description="處室名稱（阿姆哈拉語）"
    )
    floor: Optional[str] = Field(None, description="樓層")
    office_number: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("officeNumber", "officeno", "office_number"),
        description="辦公室編號"
    )
    building: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("building", "block"),
        description="區塊 / 大樓"
    )


class DepartmentResponse(TextModel):
    """處室響應"""
    id: int
    name: Optional[str] = None
    departmentamh: Optional[str] = None
    block: Optional[str] = None
    floor: Optional[str] = None
    officeno: Optional[str] = None
    office_number: Optional[str] = Field(None, alias="officeNumber")

    model_config = ConfigDict(populate_by_name=True)


class DepartmentCheckResponse(TextModel):
    """處室存在檢查響應"""
    exists: bool
    id: Optional[int] = None


class DepartmentNameItem(TextModel):
    """不重複處室名稱"""
    name: str
    id: int
