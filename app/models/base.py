"""
Base configurations and mixins for database models.

Provides the declarative base shared by every table, the timestamp mixins and
the identifier helpers used by all resources.
"""

import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql.functions import now as db_now

from app.config import settings


Base = declarative_base()


def new_id() -> str:
    """Return a fresh string-encoded UUID4 identifier."""
    return str(uuid.uuid4())


def id_column(name: str, **kwargs) -> Column:
    """Column holding a string-encoded UUID."""
    return Column(name, String(36), **kwargs)


class CreatedAtMixin:
    """Creation timestamp assigned by the database clock on insert."""

    created_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        nullable=False,
        index=True,
        comment="Timestamp when the record was created",
    )


class TimestampMixin(CreatedAtMixin):
    """
    Adds ``updated_at`` to the creation timestamp.

    Both columns default to the same statement clock, so a freshly inserted
    row has ``created_at == updated_at``. Repositories refresh ``updated_at``
    explicitly on every update.
    """

    updated_at = Column(
        DateTime(timezone=True),
        server_default=db_now(),
        onupdate=db_now(),
        nullable=False,
        comment="Timestamp when the record was last updated",
    )


SCHEMA_NAME = settings.schema_name

__all__ = [
    "Base",
    "CreatedAtMixin",
    "TimestampMixin",
    "SCHEMA_NAME",
    "id_column",
    "new_id",
]
