"""Login and registration flows that issue signed tokens."""

import logging
from typing import Any

from app.core.config import Settings
from app.core.exceptions import UnauthorizedError
from app.core.security import create_access_token
from app.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


class AuthGateway:
    """Turns verified or newly created credentials into a bearer token."""

    def __init__(self, directory: UserDirectory, settings: Settings):
        self.directory = directory
        self.settings = settings

    async def login(self, username: str, password: str) -> str:
        """
        Verify credentials and return a token for the user.

        The last-login stamp is written before the token is returned.

        Raises:
            UnauthorizedError: If the username or password is wrong.
        """
        if not await self.directory.authenticate(username, password):
            logger.warning(f"Rejected login for {username}")
            raise UnauthorizedError("Invalid user/password")

        await self.directory.update_login_timestamp(username)
        logger.info(f"User {username} logged in")
        return self._issue_token(username)

    async def register(self, fields: dict[str, Any]) -> str:
        """
        Register a user from the request payload and log them in.

        A duplicate username surfaces as the store's integrity error.
        """
        user = await self.directory.register(**fields)
        await self.directory.update_login_timestamp(user.username)
        return self._issue_token(user.username)

    def _issue_token(self, username: str) -> str:
        return create_access_token(
            username,
            self.settings.jwt_secret_key,
            self.settings.jwt_algorithm,
        )
