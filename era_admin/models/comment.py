"""留言模型

兩張獨立的留言表，與 era_data 沒有任何關聯。
"""

from enum import Enum
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from era_admin.core.database import Base


class CommentType(str, Enum):
    """一般留言類型"""
    FEEDBACK = "Feedback"
    ISSUE = "Issue"
    REPORT = "Report"


class GeneralComment(Base):
    """一般留言表"""

    __tablename__ = "general_comm"

    id: Mapped[int] = mapped_column(primary_key=True, comment="留言 ID")
    date: Mapped[str | None] = mapped_column(String(50), nullable=True, comment="留言日期")
    comment_type: Mapped[str | None] = mapped_column(
        "comment-type",
        String(20),
        nullable=True,
        comment="留言類型 (Feedback / Issue / Report)"
    )
    comment: Mapped[str | None] = mapped_column(Text, nullable=True, comment="留言內容")
    category: Mapped[str | None] = mapped_column(String(100), nullable=True, comment="分類")

    def __repr__(self) -> str:
        return f"<GeneralComment(id={self.id}, type='{self.comment_type}')>"


class PersonnelComment(Base):
    """人員回饋表"""

    __tablename__ = "personnel_comm"

    id: Mapped[int] = mapped_column(primary_key=True, comment="回饋 ID")
    department: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="處室")
    title: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="職稱")
    name: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="姓名")
    feedback_date: Mapped[str | None] = mapped_column(String(50), nullable=True, comment="回饋日期")
    feedback_text: Mapped[str | None] = mapped_column(Text, nullable=True, comment="回饋內容")

    def __repr__(self) -> str:
        return f"<PersonnelComment(id={self.id}, name='{self.name}')>"
