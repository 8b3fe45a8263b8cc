from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from anything_api.core.deps import get_current_user, get_session, require_roles
from anything_api.db.models.security import ROLE_ADMIN, User
from anything_api.schemas.auth import (
    CreateInviteRequest,
    CreateInviteResponse,
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    RefreshTokenRequest,
    RefreshTokenResponse,
    RegisterRequest,
    RegisterResponse,
    UpdateProfileRequest,
    UserRead,
)
from anything_api.schemas.common import MessageResponse
from anything_api.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"])


# PUBLIC_INTERFACE
@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login",
    description="Authenticate with email and password and receive access/refresh tokens.",
    responses={401: {"description": "Invalid credentials"}},
)
async def login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_session),
) -> LoginResponse:
    """Authenticate user and issue tokens."""
    return await AuthService(session).login(payload.email, payload.password)


# PUBLIC_INTERFACE
@router.post(
    "/refresh",
    response_model=RefreshTokenResponse,
    summary="Refresh tokens",
    description="Exchange a refresh token for a new access token; the refresh token is rotated.",
    responses={401: {"description": "Unknown, revoked or expired refresh token"}},
)
async def refresh_tokens(
    payload: RefreshTokenRequest,
    session: AsyncSession = Depends(get_session),
) -> RefreshTokenResponse:
    """Validate and rotate the refresh token."""
    return await AuthService(session).refresh(payload.refresh_token)


# PUBLIC_INTERFACE
@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    description="Create a user by redeeming an invite issued to the same email address.",
    responses={400: {"description": "Invalid or expired invite, or user already exists"}},
)
async def register_user(
    payload: RegisterRequest,
    response: Response,
    session: AsyncSession = Depends(get_session),
) -> RegisterResponse:
    """Register a new user from an invite."""
    user = await AuthService(session).register(payload)
    response.headers["Location"] = f"/api/users/{user.id}"
    return RegisterResponse(id=user.id, email=user.email, name=user.name)


# PUBLIC_INTERFACE
@router.post(
    "/invites",
    response_model=CreateInviteResponse,
    summary="Create invite",
    description="Invite an email address to register. Requires the Admin role.",
    responses={403: {"description": "Caller is not an administrator"}},
)
async def create_invite(
    payload: CreateInviteRequest,
    user: User = Depends(require_roles(ROLE_ADMIN)),
    session: AsyncSession = Depends(get_session),
) -> CreateInviteResponse:
    return await AuthService(session).create_invite(payload.email, inviter=user)


# PUBLIC_INTERFACE
@router.put(
    "/profile",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update profile",
    description="Change the display name of the current user.",
)
async def update_profile(
    payload: UpdateProfileRequest,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
) -> Response:
    await AuthService(session).update_profile(user.id, payload.name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.get(
    "/me",
    response_model=UserRead,
    summary="Read current user",
    description="Return the authenticated user's profile.",
)
async def read_current_user(user: User = Depends(get_current_user)) -> UserRead:
    """Return current user profile."""
    return UserRead.model_validate(user)


# PUBLIC_INTERFACE
@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
    description="Revoke the given refresh token. Access tokens simply expire.",
)
async def logout(
    payload: LogoutRequest,
    session: AsyncSession = Depends(get_session),
) -> MessageResponse:
    await AuthService(session).logout(payload.refresh_token)
    return MessageResponse(message="Logged out")
