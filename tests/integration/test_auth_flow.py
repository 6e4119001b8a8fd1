"""End-to-end auth flow over HTTP (in-process app, dict-backed storage).

Run: pytest tests/integration/test_auth_flow.py -v
"""

import json

from httpx import AsyncClient

PLAYER = {
    "name": "Ravi Kumar",
    "email": "ravi@example.com",
    "phone": "9000000001",
    "password": "cover-drive",
    "confirm_password": "cover-drive",
    "batting_style": "Right-handed",
    "bowling_style": "Leg spin",
    "experience": "Advanced",
}


class TestRegister:
    async def test_register_success(self, client: AsyncClient, kv_store) -> None:
        resp = await client.post("/api/v1/auth/register", json=PLAYER)

        assert resp.status_code == 201
        body = resp.json()
        assert body["code"] == 0
        assert body["message"] == "Registration successful! Welcome to Cricket-Connect Hyderabad!"
        assert body["data"]["email"] == PLAYER["email"]
        assert body["data"]["bowling_style"] == "Leg spin"
        assert "password" not in json.dumps(body["data"])
        assert body["request_id"].startswith("req_")

        stored = json.loads(kv_store.data["cricketUsers"])
        assert [p["email"] for p in stored] == [PLAYER["email"]]

    async def test_register_logs_in(self, client: AsyncClient) -> None:
        await client.post("/api/v1/auth/register", json=PLAYER)

        session = (await client.get("/api/v1/session")).json()["data"]

        assert session["is_logged_in"] is True
        assert session["current_user"]["name"] == "Ravi Kumar"

    async def test_register_duplicate_email(self, client: AsyncClient, kv_store) -> None:
        await client.post("/api/v1/auth/register", json=PLAYER)

        resp = await client.post("/api/v1/auth/register", json={**PLAYER, "name": "Other"})

        assert resp.status_code == 409
        assert resp.json()["code"] == 1002
        assert resp.json()["data"] is None
        assert len(json.loads(kv_store.data["cricketUsers"])) == 1

    async def test_register_missing_field(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/auth/register", json={**PLAYER, "phone": ""})
        assert resp.status_code == 422
        assert resp.json()["code"] == 1000
        assert resp.json()["message"] == "Please fill all required fields"

    async def test_register_password_mismatch(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/auth/register", json={**PLAYER, "confirm_password": "hook-shot"}
        )
        assert resp.status_code == 422
        assert resp.json()["message"] == "Passwords do not match"


class TestLogin:
    async def test_login_round_trip(self, client: AsyncClient) -> None:
        await client.post("/api/v1/auth/register", json=PLAYER)
        await client.post("/api/v1/auth/logout")

        resp = await client.post(
            "/api/v1/auth/login", json={"email": PLAYER["email"], "password": PLAYER["password"]}
        )

        assert resp.status_code == 200
        assert resp.json()["data"]["name"] == "Ravi Kumar"

    async def test_login_wrong_password(self, client: AsyncClient) -> None:
        await client.post("/api/v1/auth/register", json=PLAYER)
        await client.post("/api/v1/auth/logout")

        resp = await client.post(
            "/api/v1/auth/login", json={"email": PLAYER["email"], "password": "wrong"}
        )

        assert resp.status_code == 401
        assert resp.json()["code"] == 1003
        session = (await client.get("/api/v1/session")).json()["data"]
        assert session["is_logged_in"] is False

    async def test_login_empty_fields(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/auth/login", json={"email": "", "password": ""})
        assert resp.status_code == 422
        assert resp.json()["message"] == "Please fill all fields"


class TestLogout:
    async def test_logout_clears_session(self, client: AsyncClient) -> None:
        await client.post("/api/v1/auth/register", json=PLAYER)

        resp = await client.post("/api/v1/auth/logout")

        assert resp.status_code == 200
        assert resp.json()["data"]["is_logged_in"] is False
        assert resp.json()["data"]["current_user"] is None

    async def test_logout_without_login(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/auth/logout")
        assert resp.status_code == 200


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.json() == {"status": "ok", "version": "0.1.0"}


class TestLongPasswords:
    async def test_register_long_ascii_password(self, client: AsyncClient) -> None:
        plain = "p" * 73
        resp = await client.post(
            "/api/v1/auth/register", json={**PLAYER, "password": plain, "confirm_password": plain}
        )

        assert resp.status_code == 201
        assert resp.json()["code"] == 0

    async def test_register_and_login_multibyte_password(self, client: AsyncClient) -> None:
        plain = "₹" * 30
        await client.post(
            "/api/v1/auth/register", json={**PLAYER, "password": plain, "confirm_password": plain}
        )
        await client.post("/api/v1/auth/logout")

        resp = await client.post("/api/v1/auth/login", json={"email": PLAYER["email"], "password": plain})

        assert resp.status_code == 200

    async def test_login_overlong_wrong_password(self, client: AsyncClient) -> None:
        await client.post("/api/v1/auth/register", json=PLAYER)
        await client.post("/api/v1/auth/logout")

        resp = await client.post(
            "/api/v1/auth/login", json={"email": PLAYER["email"], "password": "y" * 100}
        )

        assert resp.status_code == 401
        assert resp.json()["code"] == 1003
        assert resp.json()["request_id"].startswith("req_")
