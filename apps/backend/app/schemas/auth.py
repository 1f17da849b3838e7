"""Authentication schemas."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Request schema for login."""

    username: str
    password: str


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str
    password: str
    first_name: str
    last_name: str
    phone: str


class TokenResponse(BaseModel):
    """Signed token returned by login and register."""

    token: str
