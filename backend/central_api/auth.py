"""Bearer token helpers and the FastAPI access dependency.

The central sits behind an upstream authorization layer. This module
only verifies that a request carries a valid HS256 JWT when
`settings.AUTH_ENABLED` is on; failures raise `UnauthorizedAccessError`,
which the application maps to 401.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .exceptions import UnauthorizedAccessError

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(subject: str, expire_hours: Optional[int] = None) -> str:
    """Return a signed token for `subject` valid for `expire_hours`."""
    hours = settings.JWT_EXPIRE_HOURS if expire_hours is None else expire_hours
    expire = datetime.now(timezone.utc) + timedelta(hours=hours)
    payload = {"sub": subject, "exp": int(expire.timestamp())}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode and verify a JWT token.

    Returns the decoded payload on success or raises
    `UnauthorizedAccessError` on failure.
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as exc:
        raise UnauthorizedAccessError("token expired") from exc
    except jwt.InvalidTokenError as exc:
        raise UnauthorizedAccessError("invalid token") from exc


def require_access(credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme)):
    """FastAPI dependency guarding the resource routers.

    Returns the token subject, or `None` when access checks are disabled.
    """
    if not settings.AUTH_ENABLED:
        return None
    if credentials is None:
        raise UnauthorizedAccessError("missing bearer token")
    payload = decode_token(credentials.credentials)
    subject = payload.get("sub")
    if not subject:
        raise UnauthorizedAccessError("invalid token payload")
    return subject
