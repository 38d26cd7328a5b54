from __future__ import annotations

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.db_handlers.base import BaseDBHandler
from app.models.retweet import Retweet


class RetweetDBHandler(BaseDBHandler[Retweet]):
    filter_columns = ("user_id", "original_tweet_id")

    def __init__(self, session_factory: async_sessionmaker):
        super().__init__(Retweet, session_factory)
