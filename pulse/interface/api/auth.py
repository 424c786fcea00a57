"""Caller identity for routes.

The identity token is read from the ``auth_token`` cookie, falling back to an
``Authorization: Bearer`` header.
"""

from fastapi import HTTPException, status

from pulse.domain.service import JWTService
from pulse.util.jwt import JWTError, TokenPayload

BEARER_PREFIX = "bearer "


def resolve_token(auth_token: str | None, authorization: str | None) -> str | None:
    if auth_token:
        return auth_token
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):].strip() or None
    return None


def optional_identity(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> TokenPayload | None:
    """Identity of the caller, or None for anonymous and invalid tokens."""
    return jwt_service.get_payload_from_token(resolve_token(auth_token, authorization))


def require_identity(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> TokenPayload:
    """Identity of the caller.

    Raises:
        HTTPException: 401 if no valid token was sent
    """
    token = resolve_token(auth_token, authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    try:
        return jwt_service.verify_token(token)
    except JWTError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


def require_admin(
    jwt_service: JWTService, auth_token: str | None, authorization: str | None
) -> TokenPayload:
    """Identity of an admin caller.

    Raises:
        HTTPException: 401 without a valid token, 403 for non-admins
    """
    identity = require_identity(jwt_service, auth_token, authorization)
    if not identity.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required"
        )
    return identity
