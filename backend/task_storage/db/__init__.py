"""Database package"""

from task_storage.db.session import AsyncSessionLocal, engine, get_db
from task_storage.models.base import Base

__all__ = ["Base", "AsyncSessionLocal", "engine", "get_db"]
