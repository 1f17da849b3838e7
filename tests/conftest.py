"""Shared fixtures: in-memory database, services and an HTTP client."""

import os

# Keep the app's module-level engine off Postgres while tests import it
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.config import Settings, get_settings
from app.db.base import Base
from app.db.session import get_async_session
from app.main import app
from app.models import Message, User  # noqa: F401
from app.schemas.users import RegisteredUser
from app.services.auth_gateway import AuthGateway
from app.services.message_ledger import MessageLedger
from app.services.user_directory import UserDirectory

TEST_SECRET = "test-secret-key"


# -----------------------------
# Database
# -----------------------------


@pytest.fixture
def settings() -> Settings:
    """Settings with a cheap bcrypt cost and a known signing key."""
    return Settings(
        environment="test",
        database_url="sqlite+aiosqlite://",
        jwt_secret_key=TEST_SECRET,
        jwt_algorithm="HS256",
        bcrypt_work_factor=4,
    )


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """A fresh in-memory SQLite database with foreign keys enforced."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# -----------------------------
# Services
# -----------------------------


@pytest.fixture
def directory(session: AsyncSession, settings: Settings) -> UserDirectory:
    return UserDirectory(session, settings)


@pytest.fixture
def gateway(directory: UserDirectory, settings: Settings) -> AuthGateway:
    return AuthGateway(directory, settings)


@pytest.fixture
def ledger(session: AsyncSession) -> MessageLedger:
    return MessageLedger(session)


@pytest.fixture
def make_user(
    directory: UserDirectory,
) -> Callable[..., Awaitable[RegisteredUser]]:
    """Register a user with sensible defaults for any field not given."""

    async def _make_user(username: str, **overrides: str) -> RegisteredUser:
        fields = {
            "password": "password",
            "first_name": username.capitalize(),
            "last_name": "Tester",
            "phone": "+14155550000",
        }
        fields.update(overrides)
        return await directory.register(username=username, **fields)

    return _make_user


# -----------------------------
# HTTP
# -----------------------------


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, backed by the test database."""

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_settings] = lambda: settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def register_payload() -> dict:
    return {
        "username": "alice",
        "password": "wonderland",
        "first_name": "Alice",
        "last_name": "Liddell",
        "phone": "+14155550101",
    }
