"""
Tweet model: a short post authored by one user, with optional media links.
"""

from sqlalchemy import Column, Index, String, Text

from app.models.base import SCHEMA_NAME, Base, TimestampMixin, id_column


class Tweet(Base, TimestampMixin):
    __tablename__ = "tweets"
    __table_args__ = (
        Index("ix_tweets_user_id_created_at", "user_id", "created_at"),
        {"schema": SCHEMA_NAME},
    )

    tweet_id = id_column("tweet_id", primary_key=True)
    user_id = id_column("user_id", nullable=False, comment="Author user id")

    content = Column(Text, nullable=False, comment="Tweet text")
    image_url = Column(String(1024), nullable=True, comment="Optional image URL")
    video_url = Column(String(1024), nullable=True, comment="Optional video URL")

    def __repr__(self):
        return f"<Tweet(tweet_id={self.tweet_id}, user_id={self.user_id})>"
