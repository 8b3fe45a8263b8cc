from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import exists, select

from anything_api.db.base import utcnow
from anything_api.db.models.security import RefreshToken, User, UserInvite, ROLE_USER
from .base import BaseRepository


class SecurityRepository(BaseRepository):
    """Repository for users, refresh tokens and registration invites."""

    # Users
    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Return the live user with this email."""
        stmt = select(User).where(User.email == email, User.deleted_on.is_(None))
        return await self.scalar_one_or_none(stmt)

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Return the live user with this id."""
        stmt = select(User).where(User.id == user_id, User.deleted_on.is_(None))
        return await self.scalar_one_or_none(stmt)

    async def email_taken(self, email: str) -> bool:
        """True if any user, deleted or not, already uses this email."""
        result = await self.execute(select(exists().where(User.email == email)))
        return bool(result.scalar())

    async def create_user(
        self,
        *,
        email: str,
        name: str,
        password_hash: str,
        role: str = ROLE_USER,
        commit: bool = True,
    ) -> User:
        user = User(email=email, name=name, password_hash=password_hash, role=role)
        await self.add(user)
        if commit:
            await self.commit()
            await self.session.refresh(user)
        else:
            await self.session.flush()
        return user

    async def update_user_name(self, user: User, name: str) -> User:
        user.name = name
        user.modified_on = utcnow()
        await self.commit()
        return user

    # Refresh tokens
    async def add_refresh_token(self, user_id: int, token: str, expires_at: datetime) -> RefreshToken:
        """Stage a refresh token row; the caller commits."""
        row = RefreshToken(user_id=user_id, token=token, expires_at=expires_at, is_revoked=False)
        await self.add(row)
        return row

    async def get_usable_refresh_token(self, token: str) -> Optional[RefreshToken]:
        """Return the refresh token if it is neither revoked nor expired."""
        stmt = select(RefreshToken).where(
            RefreshToken.token == token,
            RefreshToken.is_revoked.is_(False),
            RefreshToken.expires_at > utcnow(),
        )
        return await self.scalar_one_or_none(stmt)

    async def get_refresh_token(self, token: str) -> Optional[RefreshToken]:
        stmt = select(RefreshToken).where(RefreshToken.token == token)
        return await self.scalar_one_or_none(stmt)

    # Invites
    async def add_invite(
        self, *, email: str, token: str, expires_at: datetime, created_by_user_id: int
    ) -> UserInvite:
        invite = UserInvite(
            email=email,
            token=token,
            expires_at=expires_at,
            is_used=False,
            created_by_user_id=created_by_user_id,
        )
        await self.add(invite)
        await self.commit()
        return invite

    async def get_open_invite(self, token: str) -> Optional[UserInvite]:
        """Return the invite if it is unused and has not expired."""
        stmt = select(UserInvite).where(
            UserInvite.token == token,
            UserInvite.is_used.is_(False),
            UserInvite.expires_at > utcnow(),
        )
        return await self.scalar_one_or_none(stmt)
