"""SQLAlchemy models."""

from app.models.user import User
from app.models.message import Message

__all__ = [
    "User",
    "Message",
]
