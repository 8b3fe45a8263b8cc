from __future__ import annotations

import logging
from datetime import timedelta

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from anything_api.core.errors import AuthenticationError, BadRequestError, NotFoundError
from anything_api.core.security import (
    create_access_token,
    generate_invite_token,
    generate_refresh_token,
    get_password_hash,
    verify_password,
)
from anything_api.core.settings import AppSettings
from anything_api.db.base import utcnow
from anything_api.db.models.security import ROLE_USER, User
from anything_api.repositories.security import SecurityRepository
from anything_api.schemas.auth import (
    CreateInviteResponse,
    LoginResponse,
    RefreshTokenResponse,
    RegisterRequest,
)
from anything_api.services.base import BaseService

logger = logging.getLogger(__name__)

INVALID_INVITE = "Invalid or expired invite token."
USER_EXISTS = "User already exists."


def issue_access_token(user: User) -> str:
    return create_access_token(user_id=user.id, email=user.email, name=user.name, role=user.role)


class AuthService(BaseService):
    """
    Authentication flows: password login, refresh-token rotation,
    invite-only registration and profile updates.
    """

    def __init__(self, session: AsyncSession, settings: AppSettings | None = None) -> None:
        super().__init__(session, settings)
        self.repo = SecurityRepository(session)

    async def _persist_refresh_token(self, user: User) -> str:
        token = generate_refresh_token()
        expires_at = utcnow() + timedelta(days=self.settings.REFRESH_TOKEN_EXPIRE_DAYS)
        await self.repo.add_refresh_token(user.id, token, expires_at)
        return token

    # PUBLIC_INTERFACE
    async def login(self, email: str, password: str) -> LoginResponse:
        """Verify credentials and issue an access token plus a stored refresh token."""
        user = await self.repo.get_user_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError("Invalid credentials")

        access = issue_access_token(user)
        refresh = await self._persist_refresh_token(user)
        await self.repo.commit()
        logger.info("User %s logged in", user.id)
        return LoginResponse(
            access_token=access,
            refresh_token=refresh,
            email=user.email,
            name=user.name,
            role=user.role,
        )

    # PUBLIC_INTERFACE
    async def refresh(self, refresh_token: str) -> RefreshTokenResponse:
        """
        Rotate a refresh token.

        The presented token is revoked and replaced in one transaction, so each
        refresh token can be redeemed once.
        """
        stored = await self.repo.get_usable_refresh_token(refresh_token)
        if stored is None:
            raise AuthenticationError("Invalid refresh token")

        user = await self.repo.get_user_by_id(stored.user_id)
        if user is None:
            raise AuthenticationError("User not found")

        stored.is_revoked = True
        access = issue_access_token(user)
        new_refresh = await self._persist_refresh_token(user)
        await self.repo.commit()
        logger.info("Rotated refresh token for user %s", user.id)
        return RefreshTokenResponse(access_token=access, refresh_token=new_refresh)

    # PUBLIC_INTERFACE
    async def logout(self, refresh_token: str) -> None:
        """Revoke a refresh token; unknown tokens are ignored."""
        stored = await self.repo.get_refresh_token(refresh_token)
        if stored is not None and not stored.is_revoked:
            stored.is_revoked = True
            await self.repo.commit()

    # PUBLIC_INTERFACE
    async def create_invite(self, email: str, inviter: User) -> CreateInviteResponse:
        """Create a single-use invite for an email that has no account yet."""
        if await self.repo.email_taken(email):
            raise BadRequestError("User with this email already exists.")

        token = generate_invite_token()
        expires_at = utcnow() + timedelta(days=self.settings.INVITE_EXPIRE_DAYS)
        await self.repo.add_invite(
            email=email, token=token, expires_at=expires_at, created_by_user_id=inviter.id
        )
        logger.info("User %s created an invite", inviter.id)
        return CreateInviteResponse(invite_url=f"/register?token={token}", token=token)

    # PUBLIC_INTERFACE
    async def register(self, payload: RegisterRequest) -> User:
        """Redeem an invite and create a regular user."""
        invite = await self.repo.get_open_invite(payload.invite_token)
        if invite is None or invite.email != payload.email:
            raise BadRequestError(INVALID_INVITE)

        if await self.repo.email_taken(payload.email):
            raise BadRequestError(USER_EXISTS)

        invite.is_used = True
        try:
            user = await self.repo.create_user(
                email=payload.email,
                name=payload.name,
                password_hash=get_password_hash(payload.password),
                role=ROLE_USER,
                commit=False,
            )
            await self.repo.commit()
        except IntegrityError:
            # A concurrent registration for the same email won the unique index
            await self.session.rollback()
            logger.warning("Registration lost a race on a duplicate email")
            raise BadRequestError(USER_EXISTS)
        logger.info("Registered user %s from invite", user.id)
        return user

    # PUBLIC_INTERFACE
    async def update_profile(self, user_id: int, name: str) -> User:
        user = await self.repo.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return await self.repo.update_user_name(user, name)
