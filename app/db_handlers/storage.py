"""
Storage manager: one repository per table behind a single facade.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from app.db_handlers.follower import FollowerDBHandler
from app.db_handlers.like import LikeDBHandler
from app.db_handlers.retweet import RetweetDBHandler
from app.db_handlers.tweet import TweetDBHandler
from app.db_handlers.user import UserDBHandler
from app.utils.logger import setup_logger

logger = setup_logger("db_handlers.storage")


class Storage:
    def __init__(
        self, session_factory: async_sessionmaker, engine: AsyncEngine | None = None
    ):
        self._engine = engine
        self._user = UserDBHandler(session_factory)
        self._tweets = TweetDBHandler(session_factory)
        self._likes = LikeDBHandler(session_factory)
        self._followers = FollowerDBHandler(session_factory)
        self._retweets = RetweetDBHandler(session_factory)

    @property
    def user(self) -> UserDBHandler:
        return self._user

    @property
    def tweets(self) -> TweetDBHandler:
        return self._tweets

    @property
    def likes(self) -> LikeDBHandler:
        return self._likes

    @property
    def followers(self) -> FollowerDBHandler:
        return self._followers

    @property
    def retweets(self) -> RetweetDBHandler:
        return self._retweets

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database connections closed.")
