"""User API routes."""

from fastapi import APIRouter

from app.core.dependencies import CorrectUser, CurrentUsername, UserDirectoryDep
from app.schemas.messages import ReceivedMessage, SentMessage
from app.schemas.users import UserDetail, UserSummary

router = APIRouter()


@router.get("", response_model=list[UserSummary])
async def list_users(
    current_username: CurrentUsername,
    directory: UserDirectoryDep,
) -> list[UserSummary]:
    """List basic info on all users. Any logged-in user may call this."""
    return await directory.all()


@router.get("/{username}", response_model=UserDetail)
async def get_user(
    username: str,
    current_username: CorrectUser,
    directory: UserDirectoryDep,
) -> UserDetail:
    """Get the caller's own profile."""
    return await directory.get(username)


@router.get("/{username}/to", response_model=list[ReceivedMessage])
async def get_messages_to(
    username: str,
    current_username: CorrectUser,
    directory: UserDirectoryDep,
) -> list[ReceivedMessage]:
    """Messages received by the caller."""
    return await directory.messages_to(username)


@router.get("/{username}/from", response_model=list[SentMessage])
async def get_messages_from(
    username: str,
    current_username: CorrectUser,
    directory: UserDirectoryDep,
) -> list[SentMessage]:
    """Messages sent by the caller."""
    return await directory.messages_from(username)
