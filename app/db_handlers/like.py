from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db_handlers.base import BaseDBHandler, check_local_db
from app.exceptions import ConstraintViolation
from app.models.like import Like
from app.utils.logger import setup_logger

logger = setup_logger("db_handlers.like")


class LikeDBHandler(BaseDBHandler[Like]):
    filter_columns = ("tweet_id", "user_id")

    def __init__(self, session_factory: async_sessionmaker):
        super().__init__(Like, session_factory)

    @check_local_db
    async def create(self, obj_dict: dict[str, Any], *, db: AsyncSession = None) -> str:
        """Like a tweet once; the unique index catches concurrent duplicates."""
        if await self.exists(
            tweet_id=obj_dict["tweet_id"], user_id=obj_dict["user_id"], db=db
        ):
            logger.warning(
                f"User {obj_dict['user_id']} already liked tweet {obj_dict['tweet_id']}"
            )
            raise ConstraintViolation("user has already liked this tweet")
        return await super().create(obj_dict, db=db)
