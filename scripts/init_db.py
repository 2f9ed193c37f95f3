"""Create the tables and the local default user.

Usage: python scripts/init_db.py
"""
import sys
import os

# Add api path to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), "../"))

from app.db import init_db, session_scope
from app.routers.dev import get_or_create_local_user
from app.settings import settings


if __name__ == "__main__":
    print(f"Creating tables on {settings.database_url}...")
    init_db()
    with session_scope() as db:
        user = get_or_create_local_user(db)
        print(f"Local user: {user.email} ({user.id})")
    print("Done.")
