"""
Tests for POST /login and POST /register.
"""

from httpx import AsyncClient
from jose import jwt

from app.core.config import Settings

class TestRegisterRoute:
    """Tests for POST /register."""

    async def test_register_returns_token(
        self, client: AsyncClient, settings: Settings, register_payload: dict
    ) -> None:
        response = await client.post("/register", json=register_payload)

        assert response.status_code == 200
        token = response.json()["token"]
        claims = jwt.decode(token, settings.jwt_secret_key, algorithms=["HS256"])
        assert claims == {"username": "alice"}

    async def test_duplicate_username_is_conflict(
        self, client: AsyncClient, register_payload: dict
    ) -> None:
        first = await client.post("/register", json=register_payload)
        assert first.status_code == 200

        second = await client.post(
            "/register", json={**register_payload, "password": "other", "first_name": "Eve"}
        )

        assert second.status_code == 409
        assert second.json()["error"]["status"] == 409
        assert "token" not in second.json()

        # Original credentials still work
        login = await client.post(
            "/login", json={"username": "alice", "password": "wonderland"}
        )
        assert login.status_code == 200

    async def test_missing_field_is_rejected(
        self, client: AsyncClient, register_payload: dict
    ) -> None:
        del register_payload["phone"]

        response = await client.post("/register", json=register_payload)

        assert response.status_code == 422

class TestLoginRoute:
    """Tests for POST /login."""

    async def test_login_returns_token(
        self, client: AsyncClient, settings: Settings, register_payload: dict
    ) -> None:
        await client.post("/register", json=register_payload)

        response = await client.post(
            "/login", json={"username": "alice", "password": "wonderland"}
        )

        assert response.status_code == 200
        claims = jwt.decode(
            response.json()["token"], settings.jwt_secret_key, algorithms=["HS256"]
        )
        assert claims == {"username": "alice"}

    async def test_wrong_password_is_unauthorized(
        self, client: AsyncClient, register_payload: dict
    ) -> None:
        await client.post("/register", json=register_payload)

        response = await client.post(
            "/login", json={"username": "alice", "password": "looking-glass"}
        )

        assert response.status_code == 401
        assert response.json() == {
            "error": {"message": "Invalid user/password", "status": 401}
        }

    async def test_unknown_user_is_unauthorized(self, client: AsyncClient) -> None:
        response = await client.post(
            "/login", json={"username": "nobody", "password": "anything"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid user/password"


class TestLongPasswordRoutes:
    """Register and login with passwords past bcrypt's byte limit."""

    async def test_long_password_registers_and_logs_in(
        self, client: AsyncClient, register_payload: dict
    ) -> None:
        register_payload["password"] = "x" * 100

        registered = await client.post("/register", json=register_payload)
        login = await client.post("/login", json={"username": "alice", "password": "x" * 100})

        assert registered.status_code == 200
        assert login.status_code == 200
        assert "token" in login.json()

    async def test_wrong_long_password_is_unauthorized(
        self, client: AsyncClient, register_payload: dict
    ) -> None:
        register_payload["password"] = "x" * 100
        await client.post("/register", json=register_payload)

        response = await client.post(
            "/login", json={"username": "alice", "password": "y" * 100}
        )

        assert response.status_code == 401
        assert response.json() == {
            "error": {"message": "Invalid user/password", "status": 401}
        }

async def test_healthz(client: AsyncClient) -> None:
    response = await client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
