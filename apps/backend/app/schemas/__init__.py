"""Pydantic schemas."""

from app.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from app.schemas.messages import (
    MessageCreateRequest,
    MessageParty,
    MessageRecord,
    ReceivedMessage,
    SentMessage,
)
from app.schemas.users import (
    RegisteredUser,
    UserDetail,
    UserSummary,
)

__all__ = [
    # Auth
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    # Users
    "RegisteredUser",
    "UserDetail",
    "UserSummary",
    # Messages
    "MessageCreateRequest",
    "MessageParty",
    "MessageRecord",
    "ReceivedMessage",
    "SentMessage",
]
