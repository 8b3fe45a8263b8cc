"""
FastAPI dependency helpers: database session, bearer-token user resolution
and role checks.
"""
from __future__ import annotations

import logging
from typing import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from anything_api.core.logging import user_id_var
from anything_api.core.security import decode_token
from anything_api.db.models.security import User
from anything_api.db.session import get_async_session
from anything_api.repositories.security import SecurityRepository

logger = logging.getLogger(__name__)

# OAuth2 bearer (used by docs); login endpoint path referenced here
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")

_UNAUTHORIZED_HEADERS = {"WWW-Authenticate": "Bearer"}


# PUBLIC_INTERFACE
async def get_session(
    session_dep=Depends(get_async_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield the request-scoped AsyncSession."""
    yield session_dep


# PUBLIC_INTERFACE
async def get_current_user(
    token: str = Depends(oauth2_scheme),
    session: AsyncSession = Depends(get_session),
) -> User:
    """
    Resolve and return the current user from the Authorization bearer token.

    The token must be a valid, unexpired access token for this issuer and
    audience, and its subject must be a user that has not been deleted.
    """
    try:
        payload = decode_token(token)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token", headers=_UNAUTHORIZED_HEADERS
        )

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token", headers=_UNAUTHORIZED_HEADERS
        )

    repo = SecurityRepository(session)
    user = await repo.get_user_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found", headers=_UNAUTHORIZED_HEADERS
        )
    user_id_var.set(user.id)
    return user


# PUBLIC_INTERFACE
def require_roles(*required: str):
    """
    Create a dependency that requires the current user to hold one of the given roles.
    """

    async def _dep(user: User = Depends(get_current_user)) -> User:
        if user.role not in required:
            logger.warning("User %s with role %s denied; requires %s", user.id, user.role, ", ".join(required))
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient role")
        return user

    return _dep
