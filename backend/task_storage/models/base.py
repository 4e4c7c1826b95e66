"""
Base model class for all SQLAlchemy models.

WHY: Centralizing common model functionality (timestamps) in a base class
ensures consistency across all models.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    WHY: DeclarativeBase provides the foundation for SQLAlchemy 2.0 models
    with improved type hints and async support.
    """

    pass


class TimestampMixin:
    """
    Mixin to add created_at and updated_at timestamps to models.
    """

    created_at = Column(DateTime, default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime,
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )
