"""區塊相關的 Pydantic Schemas"""

from typing import List, Optional
from pydantic import AliasChoices, ConfigDict, Field

from era_admin.schemas.base import RequestModel, TextModel


class BlockDepartment(TextModel):
    """區塊中的處室"""
    id: int
    name: str
    building: str
    floor: str = ""
    office_number: str = Field("", alias="officeNumber")

    model_config = ConfigDict(populate_by_name=True)


class BlockResponse(TextModel):
    """區塊響應（由 era_data 分組計算）"""
    id: str
    name: str
    description: str = ""
    departments: List[BlockDepartment]


class BlockRename(RequestModel):
    """區塊改名"""
    name: Optional[str] = Field(None, description="新區塊名稱")
    description: Optional[str] = Field(None, description="區塊描述")


class BlockRenameResponse(TextModel):
    message: str
    id: str
    name: str
    description: Optional[str] = None
    updated_rows: int


class BlockAddDepartment(RequestModel):
    """將處室加入區塊"""
    department: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("department", "name"),
        description="處室名稱"
    )


class BlockAddDepartmentResponse(TextModel):
    created: bool
    department: BlockDepartment
