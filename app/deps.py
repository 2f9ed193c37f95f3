"""FastAPI dependencies for Recipe Share API.

Provides:
- Database session dependency
- Acting-user resolution (header → env default)

There is no authentication here; the header only names who is acting.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from .db import get_db
from .models import User
from .settings import settings


def get_current_user_optional(
    db: Session = Depends(get_db),
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> Optional[User]:
    """Resolve the acting user via header or env default.

    Resolution order:
    1. X-User-Id header (if present):
       - Try as user id
       - Try as email
       - If not found -> 404 (Strict validation)

    2. settings.default_user_email

    Returns:
        User object, or None when nothing resolves

    Raises:
        HTTPException 404 if the header names an unknown user
    """
    if x_user_id:
        user = db.get(User, x_user_id)
        if user is None:
            user = db.query(User).filter(User.email == x_user_id).first()
        if user:
            return user

        # A header that was sent but matched nothing must not fall back
        # to the default user
        raise HTTPException(
            status_code=404,
            detail=f"User '{x_user_id}' not found"
        )

    if settings.default_user_email:
        return db.query(User).filter(User.email == settings.default_user_email).first()

    return None


def get_current_user(
    user: Optional[User] = Depends(get_current_user_optional),
) -> User:
    """Like get_current_user_optional but answers 401 when nobody is acting."""
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


def can_edit(user: User, owner_id: str) -> bool:
    return user.id == owner_id or user.is_admin
