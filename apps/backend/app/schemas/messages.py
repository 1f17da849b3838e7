"""Message schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class MessageParty(BaseModel):
    """The other user on a message, as seen from one side of it."""

    username: str
    first_name: str
    last_name: str
    phone: str


class SentMessage(BaseModel):
    """A message as listed in its sender's outbox."""

    id: int
    to_user: MessageParty
    body: str
    sent_at: datetime
    read_at: datetime | None = None


class ReceivedMessage(BaseModel):
    """A message as listed in its recipient's inbox."""

    id: int
    from_user: MessageParty
    body: str
    sent_at: datetime
    read_at: datetime | None = None


class MessageCreateRequest(BaseModel):
    """Request schema for sending a message."""

    to_username: str
    body: str = Field(min_length=1)


class MessageRecord(BaseModel):
    """A stored message row."""

    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: datetime | None = None
