"""目錄資料列模型

era_data 是唯一的目錄資料表。一列是否代表「處室」或「人員」，
只取決於哪些欄位有值：
- department 不為空 → 處室
- wname 不為空 → 人員
同一列可以同時是處室與人員。
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from era_admin.core.database import Base


class EraRow(Base):
    """目錄資料表"""

    __tablename__ = "era_data"

    # 主鍵
    id: Mapped[int] = mapped_column(primary_key=True, comment="資料列 ID")

    # 位置
    block: Mapped[str | None] = mapped_column(String(100), nullable=True, index=True, comment="區塊 / 大樓")
    description: Mapped[str | None] = mapped_column(Text, nullable=True, comment="區塊描述")
    decat: Mapped[int | None] = mapped_column(Integer, nullable=True, comment="處室類別")

    # 處室
    department: Mapped[str | None] = mapped_column(String(200), nullable=True, index=True, comment="處室名稱")
    departmentamh: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="處室名稱（阿姆哈拉語）")
    floor: Mapped[str | None] = mapped_column(String(20), nullable=True, comment="樓層")
    officeno: Mapped[str | None] = mapped_column(String(50), nullable=True, comment="辦公室編號")

    # 人員
    wid: Mapped[str | None] = mapped_column(String(50), nullable=True, comment="人員編號")
    wname: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="姓名")
    wnameamh: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="姓名（阿姆哈拉語）")
    wtitle: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="職稱")
    wtitleamh: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="職稱（阿姆哈拉語）")
    wcontact: Mapped[str | None] = mapped_column(String(100), nullable=True, comment="聯絡方式")
    photo_url: Mapped[str | None] = mapped_column(String(500), nullable=True, comment="照片路徑")

    def __repr__(self) -> str:
        return f"<EraRow(id={self.id}, department='{self.department}', wname='{self.wname}')>"


# 可由 API 寫入的欄位（id 由資料庫指定）
ROW_FIELDS = (
    "block",
    "description",
    "decat",
    "department",
    "departmentamh",
    "floor",
    "officeno",
    "wid",
    "wname",
    "wnameamh",
    "wtitle",
    "wtitleamh",
    "wcontact",
    "photo_url",
)

DEPARTMENT_FIELDS = ("department", "departmentamh", "floor", "officeno", "block")

PERSONNEL_FIELDS = ("wname", "wnameamh", "wtitle", "wtitleamh", "wcontact", "department", "photo_url")

# 人員軟刪除時清空的欄位
PERSONNEL_CLEARED_FIELDS = ("wname", "wnameamh", "photo_url")
