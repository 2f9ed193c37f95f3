"""User lookup.

Endpoints:
- GET /api/users/search?q= - Exact id match, else name/email substring (max 10)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..db import get_db
from ..models import User
from ..schemas import UserOut

router = APIRouter()

SEARCH_LIMIT = 10


@router.get("/users/search", response_model=list[UserOut])
def search_users(
    q: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    query = (q or "").strip()
    if not query:
        return []

    user = db.get(User, query)
    if user:
        return [user]

    pattern = f"%{query}%"
    return (
        db.query(User)
        .filter(or_(User.name.ilike(pattern), User.email.ilike(pattern)))
        .order_by(User.email)
        .limit(SEARCH_LIMIT)
        .all()
    )
