from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db_handlers.base import BaseDBHandler, check_local_db
from app.exceptions import ConstraintViolation
from app.models.follower import Follower
from app.utils.logger import setup_logger

logger = setup_logger("db_handlers.follower")


class FollowerDBHandler(BaseDBHandler[Follower]):
    filter_columns = ("user_id", "follower_user_id")

    def __init__(self, session_factory: async_sessionmaker):
        super().__init__(Follower, session_factory)

    @check_local_db
    async def create(self, obj_dict: dict[str, Any], *, db: AsyncSession = None) -> str:
        if obj_dict["user_id"] == obj_dict["follower_user_id"]:
            logger.warning(f"User {obj_dict['user_id']} tried to follow themselves")
            raise ConstraintViolation("users cannot follow themselves")

        if await self.exists(
            user_id=obj_dict["user_id"],
            follower_user_id=obj_dict["follower_user_id"],
            db=db,
        ):
            raise ConstraintViolation(
                f"user {obj_dict['follower_user_id']} already follows {obj_dict['user_id']}"
            )
        return await super().create(obj_dict, db=db)
