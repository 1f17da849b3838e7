"""FastAPI dependencies for authentication, services and database."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import decode_access_token
from app.db.session import get_async_session
from app.services.auth_gateway import AuthGateway
from app.services.message_ledger import MessageLedger
from app.services.user_directory import UserDirectory

# HTTP Bearer token security scheme; missing headers are reported as 401 below
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_settings)]
AsyncSessionDep = Annotated[AsyncSession, Depends(get_async_session)]


def get_user_directory(session: AsyncSessionDep, settings: SettingsDep) -> UserDirectory:
    return UserDirectory(session, settings)


UserDirectoryDep = Annotated[UserDirectory, Depends(get_user_directory)]


def get_auth_gateway(directory: UserDirectoryDep, settings: SettingsDep) -> AuthGateway:
    return AuthGateway(directory, settings)


def get_message_ledger(session: AsyncSessionDep) -> MessageLedger:
    return MessageLedger(session)


def get_current_username(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: SettingsDep,
) -> str:
    """
    Dependency returning the username claim of the bearer token.

    Raises:
        UnauthorizedError: If the token is missing, invalid or has no username.
    """
    if credentials is None:
        raise UnauthorizedError("Unauthorized")

    payload = decode_access_token(
        credentials.credentials,
        settings.jwt_secret_key,
        settings.jwt_algorithm,
    )
    if payload is None:
        raise UnauthorizedError("Unauthorized")

    username: str | None = payload.get("username")
    if username is None:
        raise UnauthorizedError("Unauthorized")

    return username


CurrentUsername = Annotated[str, Depends(get_current_username)]


def ensure_correct_user(username: str, current_username: CurrentUsername) -> str:
    """Only let a user reach routes under their own ``/users/{username}``."""
    if current_username != username:
        raise ForbiddenError("Forbidden")
    return current_username


# Type aliases for convenience
AuthGatewayDep = Annotated[AuthGateway, Depends(get_auth_gateway)]
MessageLedgerDep = Annotated[MessageLedger, Depends(get_message_ledger)]
CorrectUser = Annotated[str, Depends(ensure_correct_user)]
