from __future__ import annotations

import json
from typing import Annotated, List, Optional

from pydantic import EmailStr, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application-level settings for the FastAPI service.

    This is separate from anything_api.db.config.Settings, which focuses on the database layer.
    """

    # FastAPI metadata
    APP_NAME: str = Field(default="Anything API")
    APP_DESCRIPTION: str = Field(
        default=(
            "Backend API for the Anything inventory application. "
            "Provides storage units, boxes, items and invite-only authentication."
        )
    )
    APP_VERSION: str = Field(default="0.1.0")

    # CORS
    # NoDecode: the raw env string goes to _parse_cors_origins instead of json.loads
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "https://localhost:3000"],
        description="Comma-separated list or JSON array of allowed origins.",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True)
    CORS_ALLOW_METHODS: List[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: List[str] = Field(default_factory=lambda: ["*"])

    # JWT
    JWT_SECRET_KEY: str = Field(
        default="change-me-in-production-minimum-32-characters",
        description="HMAC secret used to sign access tokens.",
    )
    JWT_ALGORITHM: str = Field(default="HS256")
    JWT_ISSUER: str = Field(default="Anything.API")
    JWT_AUDIENCE: str = Field(default="Anything.Frontend")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=15, ge=1)
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default=7, ge=1)
    INVITE_EXPIRE_DAYS: int = Field(default=7, ge=1)

    # Bootstrap administrator
    ADMIN_EMAIL: Optional[EmailStr] = Field(
        default=None, description="Seeded administrator email, normalised like login emails"
    )
    ADMIN_PASSWORD: Optional[str] = Field(default=None, description="Seeded administrator password")
    ADMIN_NAME: str = Field(default="Administrator")

    # Startup behavior
    RUN_MIGRATIONS_ON_STARTUP: bool = Field(
        default=True,
        description="If true, run Alembic migrations (upgrade head) at app startup.",
    )
    AUTO_SEED: bool = Field(
        default=True,
        description="If true, ensure the configured administrator exists after migrations.",
    )

    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v):
        """
        Accept both JSON array format and comma-separated formats for CORS origins.
        """
        if v is None:
            return ["*"]
        if isinstance(v, str) and v.strip().startswith("["):
            v = json.loads(v)
        if isinstance(v, str):
            parts = [p.strip() for p in v.split(",") if p.strip()]
            return parts or ["*"]
        if isinstance(v, list):
            return v or ["*"]
        return ["*"]


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """
    Return a new AppSettings instance populated from environment variables.

    A fresh instance is built on every call so tests can adjust the environment.
    """
    return AppSettings()
