"""Application errors mapped to HTTP responses by the top-level handlers."""

from fastapi import status


class MessagelyError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnauthorizedError(MessagelyError):
    """Raised when credentials or tokens don't verify."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(MessagelyError):
    """Raised when an authenticated user acts on another user's resources."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(MessagelyError):
    """Raised when a requested record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
