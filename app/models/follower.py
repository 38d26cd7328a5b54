"""
Follower model: directed edge ``follower_user_id -> user_id``.

``user_id`` is the account being followed. Self-follows are rejected by a
check constraint and each pair may exist only once.
"""

from sqlalchemy import CheckConstraint, Index

from app.models.base import SCHEMA_NAME, Base, CreatedAtMixin, id_column


class Follower(Base, CreatedAtMixin):
    __tablename__ = "followers"
    __table_args__ = (
        Index(
            "ux_followers_user_id_follower_user_id",
            "user_id",
            "follower_user_id",
            unique=True,
        ),
        Index("ix_followers_follower_user_id", "follower_user_id"),
        CheckConstraint("user_id <> follower_user_id", name="ck_followers_no_self"),
        {"schema": SCHEMA_NAME},
    )

    follower_id = id_column("follower_id", primary_key=True)
    user_id = id_column("user_id", nullable=False, comment="Followed user id")
    follower_user_id = id_column(
        "follower_user_id", nullable=False, comment="Following user id"
    )

    def __repr__(self):
        return (
            f"<Follower(follower_id={self.follower_id}, user_id={self.user_id}, "
            f"follower_user_id={self.follower_user_id})>"
        )
