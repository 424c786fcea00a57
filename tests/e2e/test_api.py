"""End-to-end tests for the HTTP API.

Each request gets a fresh in-memory store, so these tests cover the
interface layer: routing, authentication and error mapping. Business logic
is covered by the unit tests.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient

from pulse.config import Settings
from pulse.interface.api.app import create_app
from tests.di import build_test_container


def make_token(role: str = "USER", **overrides) -> str:
    settings = Settings()
    payload = {
        "user_id": str(uuid4()),
        "role": role,
        "exp": datetime.now(timezone.utc) + timedelta(hours=1),
    }
    payload.update(overrides)
    return jwt.encode(
        payload, settings.auth.jwt_secret, algorithm=settings.auth.jwt_algorithm
    )


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app(build_test_container(None, FastapiProvider()))
    return TestClient(app_instance)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuthentication:
    """Protected routes reject anonymous and non-admin callers."""

    def test_user_poll_requires_token(self, client):
        # Act
        response = client.get(f"/user-polls/{uuid4()}")

        # Assert
        assert response.status_code == 401

    def test_invalid_cookie_token(self, client):
        response = client.get(
            f"/user-polls/{uuid4()}", cookies={"auth_token": "invalid-token"}
        )

        assert response.status_code == 401

    def test_expired_token(self, client):
        token = make_token(exp=datetime.now(timezone.utc) - timedelta(minutes=1))

        response = client.get(
            "/invite-groups", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_admin_route_forbidden_for_user(self, client):
        response = client.delete(
            f"/categories/{uuid4()}",
            headers={"Authorization": f"Bearer {make_token()}"},
        )

        assert response.status_code == 403

    def test_admin_route_requires_token(self, client):
        response = client.post(f"/polls/{uuid4()}/close")

        assert response.status_code == 401


class TestErrorMapping:
    """Domain errors render as ``{"code", "detail"}``."""

    def test_unknown_poll_is_not_found(self, client):
        response = client.get(f"/polls/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_malformed_id_is_bad_request(self, client):
        response = client.get("/polls/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"

    def test_unknown_invite_token(self, client):
        response = client.get("/invites/unknown-token")

        assert response.status_code == 404
        assert response.json()["code"] == "INVITE_NOT_FOUND"

    def test_user_poll_on_unknown_category(self, client):
        response = client.post(
            "/user-polls",
            json={
                "category_id": str(uuid4()),
                "type": "SINGLE_CHOICE",
                "title": "Lunch?",
                "options": ["Pizza", "Sushi"],
                "start_mode": "INSTANT",
            },
            cookies={"auth_token": make_token()},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"

    def test_naive_timestamp_is_unprocessable(self, client):
        response = client.post(
            "/user-polls",
            json={
                "category_id": str(uuid4()),
                "type": "SINGLE_CHOICE",
                "title": "Lunch?",
                "options": ["Pizza", "Sushi"],
                "start_mode": "SCHEDULED",
                "start_at": "2099-01-01T10:00:00",
            },
            cookies={"auth_token": make_token()},
        )

        assert response.status_code == 422


class TestPublicReads:
    def test_feed_is_empty(self, client):
        response = client.get("/polls")

        assert response.status_code == 200
        assert response.json() == {"polls": []}

    def test_trending_is_empty(self, client):
        response = client.get("/psi/trending")

        assert response.status_code == 200
        assert response.json() == {"profiles": []}

    def test_profile_without_votes_is_neutral(self, client):
        profile_id = str(uuid4())

        response = client.get(f"/psi/profiles/{profile_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["profile_id"] == profile_id
        assert body["vote_count"] == 0
        assert body["overall_score"] == 0
        assert body["parameters"]["trust_integrity"] == 50
