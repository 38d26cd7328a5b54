from __future__ import annotations

from sqlalchemy.ext.asyncio import async_sessionmaker

from app.db_handlers.base import BaseDBHandler
from app.models.tweet import Tweet


class TweetDBHandler(BaseDBHandler[Tweet]):
    search_columns = ("content",)
    filter_columns = ("user_id",)

    def __init__(self, session_factory: async_sessionmaker):
        super().__init__(Tweet, session_factory)
