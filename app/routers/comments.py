"""Comments on posts.

Endpoints:
- GET /api/posts/{id}/comments - Newest first
- GET /api/posts/{id}/comments/count
- POST /api/posts/{id}/comments
- PUT /api/posts/{id}/comments/{comment_id} - Author or admin
- DELETE /api/posts/{id}/comments/{comment_id} - Author or admin
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from ..db import get_db
from ..deps import can_edit, get_current_user, get_current_user_optional
from ..models import Comment, User
from ..schemas import CommentCount, CommentIn, CommentOut
from .posts import get_visible_post

router = APIRouter()
logger = logging.getLogger("recipeshare.comments")


def _require_content(payload: CommentIn) -> str:
    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=400, detail="Comment content is required")
    return content


def _get_own_comment(db: Session, post_id: str, comment_id: str, user: User, action: str) -> Comment:
    comment = (
        db.query(Comment)
        .filter(Comment.id == comment_id, Comment.post_id == post_id)
        .first()
    )
    if not comment:
        raise HTTPException(status_code=404, detail="Comment not found")
    if not can_edit(user, comment.user_id):
        raise HTTPException(status_code=403, detail=f"Not authorized to {action} this comment")
    return comment


@router.get("/posts/{post_id}/comments", response_model=list[CommentOut])
def list_comments(
    post_id: str,
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_current_user_optional),
):
    get_visible_post(db, post_id, user)
    return (
        db.query(Comment)
        .options(joinedload(Comment.user))
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.desc())
        .all()
    )


@router.get("/posts/{post_id}/comments/count", response_model=CommentCount)
def count_comments(
    post_id: str,
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_current_user_optional),
):
    get_visible_post(db, post_id, user)
    count = db.query(Comment).filter(Comment.post_id == post_id).count()
    return CommentCount(count=count)


@router.post("/posts/{post_id}/comments", response_model=CommentOut, status_code=201)
def create_comment(
    post_id: str,
    payload: CommentIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    get_visible_post(db, post_id, user)
    comment = Comment(post_id=post_id, user_id=user.id, content=_require_content(payload))
    db.add(comment)
    db.commit()
    db.refresh(comment)
    logger.info(f"User {user.id} commented on post {post_id}")
    return comment


@router.put("/posts/{post_id}/comments/{comment_id}", response_model=CommentOut)
def update_comment(
    post_id: str,
    comment_id: str,
    payload: CommentIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    comment = _get_own_comment(db, post_id, comment_id, user, "update")
    comment.content = _require_content(payload)
    db.commit()
    db.refresh(comment)
    return comment


@router.delete("/posts/{post_id}/comments/{comment_id}", status_code=204)
def delete_comment(
    post_id: str,
    comment_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    comment = _get_own_comment(db, post_id, comment_id, user, "delete")
    db.delete(comment)
    db.commit()
    return None
