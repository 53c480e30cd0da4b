"""活動記錄模型"""

from enum import Enum
from sqlalchemy import String, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column
from era_admin.core.database import Base
from era_admin.models.base import CreatedAtMixin


class ActivityType(str, Enum):
    """活動類型"""
    CREATE_DEPARTMENT = "CREATE_DEPARTMENT"  # 建立處室
    UPDATE_DEPARTMENT = "UPDATE_DEPARTMENT"  # 更新處室
    DELETE_DEPARTMENT = "DELETE_DEPARTMENT"  # 刪除處室（整列）
    CREATE_PERSONNEL = "CREATE_PERSONNEL"    # 建立人員
    UPDATE_PERSONNEL = "UPDATE_PERSONNEL"    # 更新人員
    DELETE_PERSONNEL = "DELETE_PERSONNEL"    # 清除人員欄位
    RENAME_BLOCK = "RENAME_BLOCK"            # 區塊改名
    ASSIGN_BLOCK = "ASSIGN_BLOCK"            # 處室移入區塊
    CREATE_RECORD = "CREATE_RECORD"          # 新增原始資料列
    UPDATE_RECORD = "UPDATE_RECORD"          # 更新原始資料列
    DELETE_RECORD = "DELETE_RECORD"          # 刪除原始資料列
    CREATE_COMMENT = "CREATE_COMMENT"        # 新增留言
    DELETE_COMMENT = "DELETE_COMMENT"        # 刪除留言
    IMPORT_DATA = "IMPORT_DATA"              # 批次匯入


class Activity(Base, CreatedAtMixin):
    """活動記錄表"""

    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(primary_key=True, comment="活動 ID")

    activity_type: Mapped[ActivityType] = mapped_column(
        SQLEnum(ActivityType),
        nullable=False,
        index=True,
        comment="活動類型"
    )

    description: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="活動描述"
    )

    # 不設外鍵：資料列刪除後記錄仍保留
    row_id: Mapped[int | None] = mapped_column(
        nullable=True,
        index=True,
        comment="關聯資料列 / 留言 ID"
    )

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, type='{self.activity_type}', row_id={self.row_id})>"
