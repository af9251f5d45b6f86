"""Authentication dependencies for FastAPI endpoints."""

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from devconnect.auth.jwt import decode_token
from devconnect.errors import Unauthorized
from devconnect.schemas.auth import AccountIdentity

bearer_scheme = HTTPBearer(auto_error=False)


def verify_token(token: str | None) -> AccountIdentity:
    """
    Validate a bearer token and return the identity it carries.

    Raises:
        Unauthorized: token missing, malformed, expired, or signed with another key
    """
    if not token:
        raise Unauthorized("No token, authorization denied")

    payload = decode_token(token)
    if not payload or payload.get("type") != "access":
        raise Unauthorized("Token is not valid")

    try:
        return AccountIdentity(id=payload["sub"], name=payload.get("name", ""))
    except (KeyError, ValueError):
        raise Unauthorized("Token is not valid")


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    x_auth_token: str | None = Header(default=None, alias="x-auth-token"),
) -> AccountIdentity:
    """
    Resolve the caller from ``Authorization: Bearer`` or ``x-auth-token``.

    Raises:
        Unauthorized: 401 if no valid token is supplied
    """
    token = credentials.credentials if credentials else x_auth_token
    return verify_token(token)
