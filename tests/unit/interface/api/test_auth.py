"""Unit tests for caller identity resolution."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest
from fastapi import HTTPException

from pulse.config import AuthSettings
from pulse.domain.service import JWTService
from pulse.domain.value import UserRole
from pulse.interface.api.auth import (
    optional_identity,
    require_admin,
    require_identity,
    resolve_token,
)

SETTINGS = AuthSettings(jwt_secret="test-secret")


def _token(role: UserRole = UserRole.USER, secret: str = "test-secret") -> str:
    return jwt.encode(
        {
            "user_id": str(uuid4()),
            "role": role.value,
            "exp": datetime.now(timezone.utc) + timedelta(hours=1),
        },
        secret,
        algorithm="HS256",
    )


class TestResolveToken:
    def test_cookie_wins_over_header(self):
        assert resolve_token("cookie", "Bearer header") == "cookie"

    @pytest.mark.parametrize(
        "authorization,expected",
        [
            ("Bearer abc", "abc"),
            ("bearer abc", "abc"),
            ("Bearer   ", None),
            ("Basic abc", None),
            (None, None),
        ],
    )
    def test_header(self, authorization, expected):
        assert resolve_token(None, authorization) == expected


class TestIdentity:
    """Tests for optional, required and admin identity."""

    def test_optional_identity_ignores_bad_tokens(self):
        service = JWTService(SETTINGS)

        assert optional_identity(service, None, None) is None
        assert optional_identity(service, _token(secret="other"), None) is None

    def test_require_identity(self):
        service = JWTService(SETTINGS)

        identity = require_identity(service, None, f"Bearer {_token()}")

        assert identity.role == UserRole.USER
        assert not identity.is_admin

    def test_require_identity_without_token(self):
        with pytest.raises(HTTPException) as exc_info:
            require_identity(JWTService(SETTINGS), None, None)

        assert exc_info.value.status_code == 401

    @pytest.mark.parametrize("role", [UserRole.ADMIN, UserRole.SUPER_ADMIN])
    def test_require_admin_accepts_admins(self, role):
        identity = require_admin(JWTService(SETTINGS), _token(role), None)

        assert identity.is_admin

    def test_require_admin_rejects_users(self):
        with pytest.raises(HTTPException) as exc_info:
            require_admin(JWTService(SETTINGS), _token(), None)

        assert exc_info.value.status_code == 403
