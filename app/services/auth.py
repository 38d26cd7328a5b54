from app.exceptions import AuthenticationError
from app.schemas import Token, UserLogin
from app.utils.auth import create_access_token, verify_password
from app.utils.logger import setup_logger

logger = setup_logger("services.auth")


class AuthService:
    """Exchanges username and password for a bearer token."""

    def __init__(self, user_repository):
        self.user_repository = user_repository

    async def login(self, credentials: UserLogin) -> Token:
        logger.info(f"Login attempt for user '{credentials.username}'")
        user = await self.user_repository.get_user_by_username(credentials.username)

        if not user or not verify_password(credentials.password, user.password_hash):
            logger.warning(f"Rejected login for user '{credentials.username}'")
            raise AuthenticationError("incorrect username or password")

        access_token = create_access_token(
            data={"sub": user.username, "user_id": user.user_id}
        )
        return Token(access_token=access_token, token_type="bearer")
