from __future__ import annotations

import re
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PG_SCHEME = re.compile(r"^postgres(?:ql)?(?:\+\w+)?://")


def _with_driver(url: str, driver: Optional[str]) -> str:
    """
    Rewrite a PostgreSQL URL to use the given SQLAlchemy driver, or the bare
    `postgresql://` scheme when driver is None. Other URLs pass through.
    """
    if not _PG_SCHEME.match(url):
        return url
    scheme = f"postgresql+{driver}://" if driver else "postgresql://"
    return _PG_SCHEME.sub(scheme, url, count=1)


class Settings(BaseSettings):
    """
    Database connection settings.

    POSTGRES_URL wins when set (any of postgres://, postgresql:// or
    postgresql+<driver>://, or a non-PostgreSQL URL such as sqlite+aiosqlite
    for local runs). Otherwise the URL is assembled from POSTGRES_USER,
    POSTGRES_PASSWORD, POSTGRES_DB, POSTGRES_HOST and POSTGRES_PORT.
    """

    POSTGRES_URL: Optional[str] = Field(default=None, description="Full database connection URL")
    POSTGRES_USER: Optional[str] = Field(default=None, description="DB username")
    POSTGRES_PASSWORD: Optional[str] = Field(default=None, description="DB password")
    POSTGRES_DB: Optional[str] = Field(default=None, description="Database name")
    POSTGRES_HOST: str = Field(default="localhost", description="Database host")
    POSTGRES_PORT: int = Field(default=5432, description="Database port")

    SQL_ECHO: bool = Field(default=False, description="Echo SQL statements for debugging")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """Configured URL, exactly as given or assembled from the parts."""
        if self.POSTGRES_URL:
            return self.POSTGRES_URL

        missing = [
            name
            for name in ("POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_DB")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(
                "Database configuration missing: set POSTGRES_URL or " + ", ".join(missing) + "."
            )
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def async_database_url(self) -> str:
        """URL for the runtime AsyncEngine (asyncpg for PostgreSQL)."""
        return _with_driver(self.database_url, "asyncpg")

    @property
    def sync_database_url(self) -> str:
        """Driver-less URL handed to Alembic's offline mode."""
        return _with_driver(self.database_url, None)


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return a fresh database settings object."""
    return Settings()
