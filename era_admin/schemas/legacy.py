"""舊版 CSV 處室 Schema"""

from pydantic import ConfigDict

from era_admin.schemas.base import RequestModel


class LegacyDepartmentRecord(RequestModel):
    """CSV 資料列

    欄位由 era.csv 的標題列決定，因此不宣告固定欄位，全部保留為額外欄位。
    """

    model_config = ConfigDict(extra="allow")
