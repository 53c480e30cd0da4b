"""留言服務

一般留言與人員回饋是兩個獨立的紀錄，只支援新增、列出、刪除。
"""

from datetime import date
from typing import Optional, Type

from loguru import logger
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.config import settings
from era_admin.core.exceptions import NotFoundError, StoreError, ValidationError
from era_admin.models.activity import ActivityType
from era_admin.models.comment import CommentType, GeneralComment, PersonnelComment
from era_admin.services.activity import activity_service
from era_admin.services.row_store import is_blank, row_store


class CommentLog:
    """單一留言表的存取"""

    def __init__(self, model: Type[GeneralComment] | Type[PersonnelComment], label: str):
        self.model = model
        self.label = label

    async def list_comments(self, db: AsyncSession) -> list:
        result = await db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def count(self, db: AsyncSession) -> int:
        return await db.scalar(select(func.count()).select_from(self.model)) or 0

    async def _append(self, db: AsyncSession, comment):
        db.add(comment)
        try:
            await db.flush()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception("Could not insert {}", self.label)
            raise StoreError(f"Could not save {self.label}") from e

        await activity_service.log_activity(
            db,
            ActivityType.CREATE_COMMENT,
            f"Added {self.label} #{comment.id}",
            row_id=comment.id,
        )
        await row_store.commit(db)
        logger.info("{} added (id={})", self.label, comment.id)
        return comment

    async def delete(self, db: AsyncSession, comment_id: int) -> None:
        """依 id 刪除；沒有符合的紀錄時拋出 NotFoundError"""
        try:
            result = await db.execute(delete(self.model).where(self.model.id == comment_id))
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception("Could not delete {} {}", self.label, comment_id)
            raise StoreError(f"Could not delete {self.label}") from e

        if not result.rowcount:
            await db.rollback()
            raise NotFoundError("Comment not found")

        await activity_service.log_activity(
            db,
            ActivityType.DELETE_COMMENT,
            f"Deleted {self.label} #{comment_id}",
            row_id=comment_id,
        )
        await row_store.commit(db)
        logger.info("{} deleted (id={})", self.label, comment_id)


class GeneralCommentLog(CommentLog):
    """一般留言"""

    def __init__(self):
        super().__init__(GeneralComment, "general comment")

    async def create(
        self,
        db: AsyncSession,
        comment: Optional[str],
        comment_type: Optional[str],
        category: Optional[str] = None,
        comment_date: Optional[str] = None,
    ) -> GeneralComment:
        if is_blank(comment):
            raise ValidationError("Comment text is required")

        allowed = [item.value for item in CommentType]
        if comment_type not in allowed:
            raise ValidationError(f"comment-type must be one of: {', '.join(allowed)}")

        return await self._append(db, GeneralComment(
            date=comment_date or date.today().isoformat(),
            comment_type=comment_type,
            comment=comment,
            category=category or settings.DEFAULT_COMMENT_CATEGORY,
        ))


class PersonnelCommentLog(CommentLog):
    """人員回饋"""

    def __init__(self):
        super().__init__(PersonnelComment, "personnel comment")

    async def create(
        self,
        db: AsyncSession,
        department: Optional[str],
        title: Optional[str],
        name: Optional[str],
        feedback_text: Optional[str],
        feedback_date: Optional[str] = None,
    ) -> PersonnelComment:
        if any(is_blank(value) for value in (department, title, name, feedback_text)):
            raise ValidationError("Department, title, name, and feedback text are required")

        return await self._append(db, PersonnelComment(
            department=department,
            title=title,
            name=name,
            feedback_date=feedback_date or date.today().isoformat(),
            feedback_text=feedback_text,
        ))


# 建立全域留言服務實例
general_comments = GeneralCommentLog()
personnel_comments = PersonnelCommentLog()
