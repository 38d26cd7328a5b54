"""
Like model: join of a user and a tweet.

A user can like a given tweet at most once; the unique index backs the
repository's existence check so concurrent inserts cannot both succeed.
"""

from sqlalchemy import Index

from app.models.base import SCHEMA_NAME, Base, CreatedAtMixin, id_column


class Like(Base, CreatedAtMixin):
    __tablename__ = "likes"
    __table_args__ = (
        Index("ux_likes_tweet_id_user_id", "tweet_id", "user_id", unique=True),
        Index("ix_likes_user_id", "user_id"),
        {"schema": SCHEMA_NAME},
    )

    like_id = id_column("like_id", primary_key=True)
    tweet_id = id_column("tweet_id", nullable=False)
    user_id = id_column("user_id", nullable=False)

    def __repr__(self):
        return f"<Like(like_id={self.like_id}, tweet_id={self.tweet_id}, user_id={self.user_id})>"
