"""Message model for user-to-user messages."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Message(Base):
    """A directional message from one user to another."""

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    from_username: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.username"),
        nullable=False,
        index=True,
    )
    to_username: Mapped[str] = mapped_column(
        String(255),
        ForeignKey("users.username"),
        nullable=False,
        index=True,
    )
    body: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    sent_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    read_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Message {self.id} {self.from_username}->{self.to_username}>"
