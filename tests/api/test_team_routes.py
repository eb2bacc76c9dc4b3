"""Tests for the /team and /discussions endpoints."""

import pytest


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers(client, notifier) -> dict[str, str]:
    client.post("/auth/register", json={"email": "alice@x.com", "password": "pw1", "name": "Alice"})
    challenge = client.post("/auth/login", json={"email": "alice@x.com", "password": "pw1"}).json()
    session = client.post(
        "/auth/verify-otp",
        json={"userId": challenge["userId"], "otp": notifier.last_code()},
    ).json()
    return bearer(session["token"])


class TestTeamEndpoints:
    def test_requires_session(self, client):
        assert client.get("/team").status_code == 401
        assert client.delete("/team/m1").status_code == 401

    def test_add_list_remove(self, client, headers):
        response = client.post("/team", json={"name": "Bob", "email": "bob@x.com"}, headers=headers)

        assert response.status_code == 201
        member = response.json()
        assert member["role"] == "Contributor"
        assert set(member) == {"memberId", "name", "email", "role", "createdAt"}

        assert [m["memberId"] for m in client.get("/team", headers=headers).json()] == [member["memberId"]]

        assert client.delete(f"/team/{member['memberId']}", headers=headers).json() == {"ok": True}
        assert client.get("/team", headers=headers).json() == []

    def test_add_requires_fields(self, client, headers):
        response = client.post("/team", json={"name": "Bob"}, headers=headers)

        assert response.status_code == 400
        assert response.json()["message"] == "email is required"

    def test_remove_unknown(self, client, headers):
        response = client.delete("/team/missing", headers=headers)

        assert response.status_code == 404
        assert response.json()["error"] == "MEMBER_NOT_FOUND"


class TestDiscussionEndpoints:
    def test_requires_session(self, client):
        assert client.get("/discussions").status_code == 401

    def test_post_and_filter(self, client, headers, clock):
        body = {"content": "Hi", "userId": "u1", "userName": "Alice"}
        general = client.post("/discussions", json=body, headers=headers)
        clock.advance(minutes=1)
        scoped = client.post("/discussions", json={**body, "projectId": "apollo"}, headers=headers)

        assert general.status_code == 201
        assert general.json()["projectId"] is None
        assert scoped.json()["projectId"] == "apollo"

        everything = client.get("/discussions", headers=headers).json()
        assert [m["messageId"] for m in everything] == [
            scoped.json()["messageId"],
            general.json()["messageId"],
        ]
        only_apollo = client.get("/discussions?projectId=apollo", headers=headers).json()
        assert [m["messageId"] for m in only_apollo] == [scoped.json()["messageId"]]

    def test_post_requires_fields(self, client, headers):
        response = client.post("/discussions", json={"content": "Hi"}, headers=headers)

        assert response.status_code == 400
        assert response.json()["message"] == "userId and userName are required"

    def test_delete(self, client, headers):
        message = client.post(
            "/discussions", json={"content": "Hi", "userId": "u1", "userName": "Alice"}, headers=headers
        ).json()

        assert client.delete(f"/discussions/{message['messageId']}", headers=headers).json() == {"ok": True}
        assert client.delete(f"/discussions/{message['messageId']}", headers=headers).status_code == 404
