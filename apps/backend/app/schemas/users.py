"""User directory records."""

from datetime import datetime

from pydantic import BaseModel


class RegisteredUser(BaseModel):
    """Row returned by registration. ``password`` holds the digest."""

    username: str
    password: str
    first_name: str
    last_name: str
    phone: str


class UserSummary(BaseModel):
    """Basic info used by the user listing."""

    username: str
    first_name: str
    last_name: str


class UserDetail(BaseModel):
    """Full profile of a single user, without the password digest."""

    username: str
    first_name: str
    last_name: str
    phone: str
    join_at: datetime
    last_login_at: datetime | None = None
