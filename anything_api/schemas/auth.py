from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from .common import CamelModel


class LoginRequest(CamelModel):
    """Email and password credentials."""
    email: EmailStr = Field(..., description="User email")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(CamelModel):
    """Tokens plus the profile fields the frontend keeps in its session."""
    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token")
    email: str = Field(..., description="User email")
    name: str = Field(..., description="Display name")
    role: str = Field(..., description="Admin or User")


class RefreshTokenRequest(CamelModel):
    """Request to rotate a refresh token."""
    refresh_token: str = Field(..., min_length=1, description="Refresh token")


class RefreshTokenResponse(CamelModel):
    """New access/refresh token pair."""
    access_token: str = Field(..., description="JWT access token")
    refresh_token: str = Field(..., description="Opaque refresh token")


class RegisterRequest(CamelModel):
    """Registration details for redeeming an invite."""
    email: EmailStr = Field(..., description="User email, must match the invite")
    password: str = Field(..., min_length=8, max_length=100, description="User password")
    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    invite_token: str = Field(..., min_length=1, description="Invite token")


class RegisterResponse(CamelModel):
    id: int = Field(..., description="New user ID")
    email: str = Field(..., description="User email")
    name: str = Field(..., description="Display name")


class CreateInviteRequest(CamelModel):
    """Email address to invite."""
    email: EmailStr = Field(..., description="Invitee email")


class CreateInviteResponse(CamelModel):
    invite_url: str = Field(..., description="Relative registration URL carrying the token")
    token: str = Field(..., description="Invite token")


class UpdateProfileRequest(CamelModel):
    """Profile fields the current user may change."""
    name: str = Field(..., min_length=1, max_length=200, description="Display name")


class LogoutRequest(CamelModel):
    refresh_token: str = Field(..., min_length=1, description="Refresh token to revoke")


class UserRead(CamelModel):
    """Current user read model."""
    id: int = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    name: str = Field(..., description="Display name")
    role: str = Field(..., description="Admin or User")
    created_on: datetime = Field(..., description="Created timestamp")
