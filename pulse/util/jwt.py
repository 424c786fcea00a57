"""JWT token utilities.

Tokens are issued by the external auth service; this API only verifies them.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel, ValidationError

from pulse.config import AuthSettings
from pulse.domain.value import UserRole


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    role: UserRole = UserRole.USER
    exp: datetime

    @property
    def is_admin(self) -> bool:
        return self.role in (UserRole.ADMIN, UserRole.SUPER_ADMIN)


class JWTError(Exception):
    """JWT-related error."""

    pass


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired, or lacks the expected claims
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValidationError:
        raise JWTError("Malformed token claims")
