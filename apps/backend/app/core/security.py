"""JWT and password security utilities."""

import bcrypt
from jose import JWTError, jwt

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        _password_bytes(plain_password),
        hashed_password.encode("utf-8"),
    )


def hash_password(password: str, rounds: int) -> str:
    """Hash a password for storage using the given bcrypt cost."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def create_access_token(username: str, secret_key: str, algorithm: str) -> str:
    """
    Create a JWT access token.

    The token carries a single ``username`` claim and never expires.

    Args:
        username: The user the token is issued to.
        secret_key: Signing secret.
        algorithm: JWS algorithm, e.g. ``HS256``.

    Returns:
        Encoded JWT token string.
    """
    return jwt.encode({"username": username}, secret_key, algorithm=algorithm)


def decode_access_token(token: str, secret_key: str, algorithm: str) -> dict | None:
    """
    Decode and validate a JWT access token.

    Args:
        token: The JWT token string.
        secret_key: Signing secret.
        algorithm: Expected JWS algorithm.

    Returns:
        Decoded payload dict, or None if invalid.
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[algorithm])
        return payload
    except JWTError:
        return None
