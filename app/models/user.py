"""
User account model.

Users are referenced by every other resource through a ``user_id`` string.
Deleting a user only stamps ``deleted_at``; the row (and its username) stays.
"""

from sqlalchemy import Column, DateTime, Index, String, Text

from app.models.base import SCHEMA_NAME, Base, TimestampMixin, id_column


class User(Base, TimestampMixin):
    """
    Registered account with profile information.

    The bcrypt password hash is stored here but never leaves the service
    layer; response schemas do not carry it.
    """

    __tablename__ = "users"
    __table_args__ = (
        Index("ix_users_username", "username", unique=True),
        {"schema": SCHEMA_NAME},
    )

    user_id = id_column("user_id", primary_key=True)

    username = Column(
        String(50),
        nullable=False,
        comment="Unique username for user identification and login",
    )

    password_hash = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    name = Column(String(100), nullable=False, default="", comment="Display name")
    bio = Column(Text, nullable=False, default="", comment="Free-form biography")
    profile_picture = Column(
        String(1024), nullable=False, default="", comment="Profile picture URL"
    )

    deleted_at = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Soft delete marker; NULL while the account is active",
    )

    def __repr__(self):
        return f"<User(user_id={self.user_id}, username='{self.username}')>"
