from __future__ import annotations

from typing import Any

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db_handlers.base import BaseDBHandler, check_local_db
from app.exceptions import ConstraintViolation, NoRowsAffected, NotFound
from app.models.user import User
from app.utils.logger import setup_logger

logger = setup_logger("db_handlers.user")


class UserDBHandler(BaseDBHandler[User]):
    """
    Users are soft-deleted: ``remove`` stamps ``deleted_at`` and every read
    or write path below treats a stamped row as missing. The username of a
    deleted account stays reserved.
    """

    search_columns = ("username", "name")

    def __init__(self, session_factory: async_sessionmaker):
        super().__init__(User, session_factory)

    def base_conditions(self) -> list:
        return [self.table.c.deleted_at.is_(None)]

    @check_local_db
    async def create(self, obj_dict: dict[str, Any], *, db: AsyncSession = None) -> str:
        if await self.exists(username=obj_dict["username"], db=db):
            raise ConstraintViolation(
                f"username '{obj_dict['username']}' already exists"
            )
        return await super().create(obj_dict, db=db)

    @check_local_db
    async def remove(self, id: str, *, db: AsyncSession = None) -> None:
        stmt = (
            update(self.table)
            .where(self.pk == id, *self.base_conditions())
            .values(deleted_at=func.now(), updated_at=func.now())
        )
        result = await db.execute(stmt)
        if result.rowcount == 0:
            logger.error(f"No rows affected while deleting user {id}")
            raise NoRowsAffected(f"no rows affected while deleting user {id}")
        logger.info(f"Soft-deleted user {id}")

    @check_local_db
    async def get_user_by_username(
        self, username: str, *, db: AsyncSession = None
    ) -> User | None:
        """Get an active user by username."""
        stmt = select(User).where(User.username == username, *self.base_conditions())
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @check_local_db
    async def get_password_hash(self, id: str, *, db: AsyncSession = None) -> str:
        stmt = select(User.password_hash).where(self.pk == id, *self.base_conditions())
        result = await db.execute(stmt)
        password_hash = result.scalar_one_or_none()
        if password_hash is None:
            raise NotFound(f"user {id} not found")
        return password_hash

    @check_local_db
    async def update_password(
        self, id: str, password_hash: str, *, db: AsyncSession = None
    ) -> None:
        stmt = (
            update(self.table)
            .where(self.pk == id, *self.base_conditions())
            .values(password_hash=password_hash, updated_at=func.now())
        )
        result = await db.execute(stmt)
        if result.rowcount == 0:
            logger.error(f"No rows affected while updating password of user {id}")
            raise NoRowsAffected(f"no rows affected while updating user {id} password")
