"""
Retweet model: a user re-sharing an existing tweet. No uniqueness rule applies.
"""

from sqlalchemy import Index

from app.models.base import SCHEMA_NAME, Base, CreatedAtMixin, id_column


class Retweet(Base, CreatedAtMixin):
    __tablename__ = "retweets"
    __table_args__ = (
        Index("ix_retweets_original_tweet_id", "original_tweet_id"),
        Index("ix_retweets_user_id", "user_id"),
        {"schema": SCHEMA_NAME},
    )

    retweet_id = id_column("retweet_id", primary_key=True)
    original_tweet_id = id_column("original_tweet_id", nullable=False)
    user_id = id_column("user_id", nullable=False)

    def __repr__(self):
        return f"<Retweet(retweet_id={self.retweet_id}, original_tweet_id={self.original_tweet_id})>"
