from __future__ import annotations

from typing import Any

from app.exceptions import ValidationError
from app.schemas import CreateUser, UpdateUserPassword, User, UsersResponse
from app.services.base import BaseService
from app.utils.auth import get_password_hash, verify_password
from app.utils.logger import setup_logger

logger = setup_logger("services.user")


class UserService(BaseService):
    """Accounts; passwords are stored as bcrypt hashes only."""

    resource = "user"
    schema = User
    list_schema = UsersResponse
    list_field = "users"
    log_exclude = {"password", "old_password", "new_password"}

    def _to_record(self, data: CreateUser) -> dict[str, Any]:
        record = data.model_dump(exclude={"password"})
        record["password_hash"] = get_password_hash(data.password)
        return record

    async def update_password(self, id: str, data: UpdateUserPassword) -> None:
        """Replace the password after checking the current one."""
        logger.info(f"Updating password of user {id}")
        try:
            current_hash = await self.repository.get_password_hash(id)
            if not verify_password(data.old_password, current_hash):
                raise ValidationError("old password did not match")
            await self.repository.update_password(
                id, get_password_hash(data.new_password)
            )
        except Exception as e:
            logger.error(f"Failed to update password of user {id}: {e}")
            raise
