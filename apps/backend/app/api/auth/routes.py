"""Auth API routes."""

from fastapi import APIRouter

from app.core.dependencies import AuthGatewayDep
from app.schemas.auth import LoginRequest, RegisterRequest, TokenResponse

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    payload: LoginRequest,
    gateway: AuthGatewayDep,
) -> TokenResponse:
    """
    Authenticate user and return a signed token.

    Raises:
        UnauthorizedError: If credentials are invalid ("Invalid user/password").
    """
    token = await gateway.login(payload.username, payload.password)
    return TokenResponse(token=token)


@router.post("/register", response_model=TokenResponse)
async def register(
    payload: RegisterRequest,
    gateway: AuthGatewayDep,
) -> TokenResponse:
    """
    Register a new user, log them in and return a signed token.

    A taken username is reported by the store's integrity error handler.
    """
    token = await gateway.register(payload.model_dump())
    return TokenResponse(token=token)
