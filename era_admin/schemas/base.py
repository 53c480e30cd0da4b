"""Schema 共用基礎類別"""

from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator


class TextModel(BaseModel):
    """數字一律轉為字串

    前端有時以數字傳送樓層、辦公室編號或電話，舊資料庫的 floor 欄位也存成整數。
    """

    @field_validator("*", mode="before")
    @classmethod
    def numbers_to_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class RequestModel(TextModel):
    """請求 Schema 基礎類別"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
