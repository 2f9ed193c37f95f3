"""Reactions on posts and on comments.

Endpoints:
- GET /api/posts/{id}/reactions - Counts per type plus the caller's own
- POST /api/posts/{id}/reactions - Toggle one reaction type
- GET /api/comments/{id}/reactions
- POST /api/comments/{id}/reactions
"""

from collections import Counter
from typing import Optional, Sequence

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..db import get_db
from ..deps import get_current_user, get_current_user_optional
from ..models import COMMENT_REACTION_TYPES, REACTION_TYPES, Comment, CommentReaction, Reaction, User
from ..schemas import ReactionCount, ReactionsOut, ReactionToggle
from .posts import get_visible_post

router = APIRouter()


def _summarize(db: Session, parent_column, parent_id: str, types: Sequence[str],
               user: Optional[User]) -> ReactionsOut:
    model = parent_column.class_
    rows = db.query(model.type, model.user_id).filter(parent_column == parent_id).all()
    counts = Counter(r.type for r in rows)
    mine = sorted(r.type for r in rows if user is not None and r.user_id == user.id)
    return ReactionsOut(
        reactions=[ReactionCount(type=t, count=counts[t]) for t in types if counts[t]],
        user_reactions=mine,
    )


def _toggle(db: Session, parent_column, parent_id: str, reaction_type: str, user: User):
    """Add the reaction if the user has not given it yet, otherwise remove it."""
    model = parent_column.class_
    existing = (
        db.query(model)
        .filter(
            parent_column == parent_id,
            model.user_id == user.id,
            model.type == reaction_type,
        )
        .first()
    )
    if existing:
        db.delete(existing)
    else:
        db.add(model(**{parent_column.key: parent_id, "user_id": user.id, "type": reaction_type}))
    db.commit()


def _check_type(reaction_type: str, types: Sequence[str]):
    if reaction_type not in types:
        raise HTTPException(status_code=400, detail="Invalid reaction type")


def get_visible_comment(db: Session, comment_id: str, user: Optional[User]) -> Comment:
    """404 for an unknown comment; the post's visibility rules apply to its comments."""
    comment = db.get(Comment, comment_id)
    if not comment:
        raise HTTPException(status_code=404, detail="Comment not found")
    get_visible_post(db, comment.post_id, user)
    return comment


# --- Posts ---

@router.get("/posts/{post_id}/reactions", response_model=ReactionsOut)
def get_reactions(
    post_id: str,
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_current_user_optional),
):
    get_visible_post(db, post_id, user)
    return _summarize(db, Reaction.post_id, post_id, REACTION_TYPES, user)


@router.post("/posts/{post_id}/reactions", response_model=ReactionsOut)
def toggle_reaction(
    post_id: str,
    payload: ReactionToggle,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    _check_type(payload.type, REACTION_TYPES)
    get_visible_post(db, post_id, user)
    _toggle(db, Reaction.post_id, post_id, payload.type, user)
    return _summarize(db, Reaction.post_id, post_id, REACTION_TYPES, user)


# --- Comments ---

@router.get("/comments/{comment_id}/reactions", response_model=ReactionsOut)
def get_comment_reactions(
    comment_id: str,
    db: Session = Depends(get_db),
    user: Optional[User] = Depends(get_current_user_optional),
):
    get_visible_comment(db, comment_id, user)
    return _summarize(db, CommentReaction.comment_id, comment_id, COMMENT_REACTION_TYPES, user)


@router.post("/comments/{comment_id}/reactions", response_model=ReactionsOut)
def toggle_comment_reaction(
    comment_id: str,
    payload: ReactionToggle,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    _check_type(payload.type, COMMENT_REACTION_TYPES)
    get_visible_comment(db, comment_id, user)
    _toggle(db, CommentReaction.comment_id, comment_id, payload.type, user)
    return _summarize(db, CommentReaction.comment_id, comment_id, COMMENT_REACTION_TYPES, user)
