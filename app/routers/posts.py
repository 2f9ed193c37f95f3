"""Posts (recipes) CRUD API router.

Endpoints:
- GET /api/posts - List public posts plus the caller's own
- POST /api/posts - Create a post
- GET /api/posts/{id} - Get a post
- PUT /api/posts/{id} - Replace a post
- PATCH /api/posts/{id} - Update some fields of a post
- DELETE /api/posts/{id} - Delete a post with its comments and reactions
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session, joinedload

from ..db import get_db
from ..deps import can_edit, get_current_user, get_current_user_optional
from ..models import Post, User
from ..schemas import PostCreate, PostOut, PostPatch

router = APIRouter()
logger = logging.getLogger("recipeshare.posts")

_NOT_NULL_FIELDS = ("title", "description", "ingredients", "steps", "images", "tags", "is_public")


def get_post_or_404(db: Session, post_id: str) -> Post:
    post = (
        db.query(Post)
        .options(joinedload(Post.user))
        .filter(Post.id == post_id)
        .first()
    )
    if not post:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return post


def get_visible_post(db: Session, post_id: str, user: Optional[User]) -> Post:
    """Fetch a post the acting user may see: public, or their own."""
    post = get_post_or_404(db, post_id)
    if not post.is_public and (user is None or post.user_id != user.id):
        raise HTTPException(status_code=403, detail="Not authorized to view this recipe")
    return post


def get_editable_post(db: Session, post_id: str, user: User, action: str = "edit") -> Post:
    post = get_post_or_404(db, post_id)
    if not can_edit(user, post.user_id):
        raise HTTPException(status_code=403, detail=f"Not authorized to {action} this recipe")
    return post


@router.get("/posts", response_model=list[PostOut])
def list_posts(
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_current_user_optional),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    search: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    cooked_from: Optional[date] = Query(None),
    cooked_to: Optional[date] = Query(None),
    mine: bool = Query(False),
):
    """List posts visible to the caller, newest first.

    cooked_from / cooked_to select the calendar range by cooked_on date.
    """
    query = db.query(Post).options(joinedload(Post.user))

    if mine:
        if user is None:
            raise HTTPException(status_code=401, detail="Not authenticated")
        query = query.filter(Post.user_id == user.id)
    elif user is not None:
        query = query.filter(or_(Post.is_public.is_(True), Post.user_id == user.id))
    else:
        query = query.filter(Post.is_public.is_(True))

    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Post.title.ilike(pattern), Post.description.ilike(pattern)))

    if tag:
        # JSON text match keeps this portable between SQLite and PostgreSQL
        query = query.filter(cast(Post.tags, String).ilike(f'%"{tag}"%'))

    if cooked_from:
        query = query.filter(Post.cooked_on >= cooked_from)
    if cooked_to:
        query = query.filter(Post.cooked_on <= cooked_to)

    return (
        query
        .order_by(Post.created_at.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


@router.post("/posts", response_model=PostOut, status_code=201)
def create_post(
    payload: PostCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Create a new post owned by the acting user."""
    post = Post(user_id=user.id, **payload.model_dump())
    db.add(post)
    db.commit()
    logger.info(f"Created post {post.id} for user {user.id}")
    return get_post_or_404(db, post.id)


@router.get("/posts/{post_id}", response_model=PostOut)
def get_post(
    post_id: str,
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_current_user_optional),
):
    return get_visible_post(db, post_id, user)


@router.put("/posts/{post_id}", response_model=PostOut)
def replace_post(
    post_id: str,
    payload: PostCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Replace every editable field of a post."""
    post = get_editable_post(db, post_id, user)
    for field, value in payload.model_dump().items():
        setattr(post, field, value)
    db.commit()
    return get_post_or_404(db, post_id)


@router.patch("/posts/{post_id}", response_model=PostOut)
def update_post(
    post_id: str,
    payload: PostPatch,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Update only the fields present in the request body."""
    post = get_editable_post(db, post_id, user)
    changes = payload.model_dump(exclude_unset=True)
    for field in _NOT_NULL_FIELDS:
        if field in changes and changes[field] is None:
            raise HTTPException(status_code=400, detail=f"{field} cannot be null")
    for field, value in changes.items():
        setattr(post, field, value)
    db.commit()
    return get_post_or_404(db, post_id)


@router.delete("/posts/{post_id}", status_code=204)
def delete_post(
    post_id: str,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Delete a post. Comments and reactions go with it."""
    post = get_editable_post(db, post_id, user, action="delete")
    db.delete(post)
    db.commit()
    logger.info(f"Deleted post {post_id}")
    return None
