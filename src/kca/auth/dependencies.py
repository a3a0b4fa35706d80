"""FastAPI authentication dependencies."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import jwt
from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from kca.auth.jwt import verify_token
from kca.database import DataStore, get_store
from kca.db.models import User

_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    store: DataStore = Depends(get_store),
) -> User:
    """
    Extract and verify the bearer JWT, return the User it belongs to.

    Raises 401 when the token is missing or invalid, 404 when the user it
    names no longer exists.
    """
    if credentials is None:
        raise HTTPException(status_code=401, detail="Access token required")
    try:
        payload = verify_token(credentials.credentials, expected_type="access")
    except jwt.InvalidTokenError as e:
        raise HTTPException(status_code=401, detail=str(e)) from e

    user = await store.users.find_by_id(str(payload["sub"]))
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def require_roles(*roles: str) -> Callable[..., Awaitable[User]]:
    """Dependency factory: the current user must hold one of ``roles`` (403 otherwise)."""

    async def _check(user: User = Depends(get_current_user)) -> User:
        if user.role not in roles:
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return user

    return _check
