"""Tests for the admin-only /users endpoints."""

import pytest


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def create_session(client, notifier, email, password, name) -> dict:
    client.post("/auth/register", json={"email": email, "password": password, "name": name})
    challenge = client.post("/auth/login", json={"email": email, "password": password}).json()
    return client.post(
        "/auth/verify-otp",
        json={"userId": challenge["userId"], "otp": notifier.last_code()},
    ).json()


@pytest.fixture
def admin(client, notifier) -> dict:
    return create_session(client, notifier, "alice@x.com", "pw1", "Alice")


@pytest.fixture
def pending_user(client) -> dict:
    return client.post(
        "/auth/register", json={"email": "bob@x.com", "password": "pw2", "name": "Bob"}
    ).json()


class TestAdminAccess:
    def test_requires_token(self, client):
        response = client.get("/users")

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"

    def test_requires_admin_role(self, client, notifier, admin, pending_user):
        """A signed-in non-admin should get 403 on every admin route."""
        client.patch(
            f"/users/{pending_user['userId']}/approve",
            json={"role": "Contributor"},
            headers=bearer(admin["token"]),
        )
        challenge = client.post("/auth/login", json={"email": "bob@x.com", "password": "pw2"}).json()
        contributor = client.post(
            "/auth/verify-otp",
            json={"userId": challenge["userId"], "otp": notifier.last_code()},
        ).json()
        headers = bearer(contributor["token"])

        responses = [
            client.get("/users", headers=headers),
            client.patch(f"/users/{admin['userId']}/role", json={"role": "Pending"}, headers=headers),
            client.delete(f"/users/{admin['userId']}", headers=headers),
        ]

        for response in responses:
            assert response.status_code == 403
            assert response.json()["error"] == "ADMIN_REQUIRED"


class TestUserManagement:
    def test_list_users(self, client, admin, pending_user):
        response = client.get("/users", headers=bearer(admin["token"]))

        assert response.status_code == 200
        users = response.json()
        assert [u["email"] for u in users] == ["alice@x.com", "bob@x.com"]
        for user in users:
            assert "password" not in user
            assert "token" not in user
            assert "otp" not in user

    def test_approve(self, client, admin, pending_user):
        response = client.patch(
            f"/users/{pending_user['userId']}/approve",
            json={"role": "Contributor"},
            headers=bearer(admin["token"]),
        )

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        listed = {u["userId"]: u for u in client.get("/users", headers=bearer(admin["token"])).json()}
        assert listed[pending_user["userId"]]["status"] == "active"
        assert listed[pending_user["userId"]]["role"] == "Contributor"

    def test_approve_without_role(self, client, admin, pending_user):
        response = client.patch(
            f"/users/{pending_user['userId']}/approve",
            json={},
            headers=bearer(admin["token"]),
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_INPUT"

    def test_change_role(self, client, admin, pending_user):
        response = client.patch(
            f"/users/{pending_user['userId']}/role",
            json={"role": "Viewer"},
            headers=bearer(admin["token"]),
        )

        assert response.status_code == 200
        listed = {u["userId"]: u for u in client.get("/users", headers=bearer(admin["token"])).json()}
        assert listed[pending_user["userId"]]["role"] == "Viewer"
        assert listed[pending_user["userId"]]["status"] == "pending"

    def test_delete(self, client, admin, pending_user):
        response = client.delete(f"/users/{pending_user['userId']}", headers=bearer(admin["token"]))

        assert response.status_code == 200
        listed = client.get("/users", headers=bearer(admin["token"])).json()
        assert [u["email"] for u in listed] == ["alice@x.com"]

    def test_unknown_user(self, client, admin):
        response = client.delete("/users/does-not-exist", headers=bearer(admin["token"]))

        assert response.status_code == 404
        assert response.json()["error"] == "USER_NOT_FOUND"
