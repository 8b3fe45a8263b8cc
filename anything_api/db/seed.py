"""
Database seeding for the bootstrap administrator.

Creates the user named by ADMIN_EMAIL / ADMIN_PASSWORD (role Admin, display
name ADMIN_NAME) unless a user with that email already exists. Without an
administrator nobody could issue invites, so this runs on startup when
AUTO_SEED is enabled.

Usage:
  python -m anything_api.db.run_migrations upgrade head
  python -m anything_api.db.seed
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from anything_api.core.security import get_password_hash
from anything_api.core.settings import AppSettings, get_app_settings
from anything_api.db.models.security import ROLE_ADMIN, User
from anything_api.db.session import get_session_maker
from anything_api.repositories.security import SecurityRepository

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
async def ensure_admin_user(
    session: AsyncSession | None = None,
    settings: AppSettings | None = None,
) -> Optional[User]:
    """
    Ensure the configured administrator exists.

    Returns the existing or newly created user, or None when no administrator
    credentials are configured.
    """
    settings = settings or get_app_settings()
    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD not set; skipping administrator seed.")
        return None

    if session is None:
        async with get_session_maker()() as own_session:
            return await _ensure_admin(own_session, settings)
    return await _ensure_admin(session, settings)


async def _ensure_admin(session: AsyncSession, settings: AppSettings) -> User:
    repo = SecurityRepository(session)
    existing = await repo.get_user_by_email(settings.ADMIN_EMAIL)
    if existing is not None:
        logger.info("Administrator %s already present.", settings.ADMIN_EMAIL)
        return existing

    user = await repo.create_user(
        email=settings.ADMIN_EMAIL,
        name=settings.ADMIN_NAME,
        password_hash=get_password_hash(settings.ADMIN_PASSWORD),
        role=ROLE_ADMIN,
    )
    logger.info("Seeded administrator %s (id=%s).", user.email, user.id)
    return user


def main() -> None:
    asyncio.run(ensure_admin_user())


if __name__ == "__main__":
    main()
