"""留言管理 API 路由"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from era_admin.core.database import get_db
from era_admin.schemas import (
    GeneralCommentCreate,
    GeneralCommentResponse,
    MessageResponse,
    PersonnelCommentCreate,
    PersonnelCommentResponse,
)
from era_admin.services.comments import general_comments, personnel_comments

router = APIRouter(prefix="/comments", tags=["留言管理"])


# ===== 一般留言 =====

@router.get("/general", response_model=List[GeneralCommentResponse], summary="取得一般留言")
async def list_general_comments(db: AsyncSession = Depends(get_db)):
    return await general_comments.list_comments(db)


@router.post(
    "/general",
    response_model=GeneralCommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="新增一般留言"
)
async def create_general_comment(
    payload: GeneralCommentCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    新增一般留言

    - **comment-type**: Feedback / Issue / Report
    - **category**: 未提供時為 general
    """
    return await general_comments.create(
        db,
        comment=payload.comment,
        comment_type=payload.comment_type,
        category=payload.category,
        comment_date=payload.date,
    )


@router.delete("/general/{comment_id}", response_model=MessageResponse, summary="刪除一般留言")
async def delete_general_comment(comment_id: int, db: AsyncSession = Depends(get_db)):
    await general_comments.delete(db, comment_id)
    return MessageResponse(message="Comment deleted successfully")


# ===== 人員回饋 =====

@router.get("/personnel", response_model=List[PersonnelCommentResponse], summary="取得人員回饋")
async def list_personnel_comments(db: AsyncSession = Depends(get_db)):
    return await personnel_comments.list_comments(db)


@router.post(
    "/personnel",
    response_model=PersonnelCommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="新增人員回饋"
)
async def create_personnel_comment(
    payload: PersonnelCommentCreate,
    db: AsyncSession = Depends(get_db)
):
    return await personnel_comments.create(
        db,
        department=payload.department,
        title=payload.title,
        name=payload.name,
        feedback_text=payload.feedback_text,
        feedback_date=payload.feedback_date,
    )


@router.delete("/personnel/{comment_id}", response_model=MessageResponse, summary="刪除人員回饋")
async def delete_personnel_comment(comment_id: int, db: AsyncSession = Depends(get_db)):
    await personnel_comments.delete(db, comment_id)
    return MessageResponse(message="Comment deleted successfully")
