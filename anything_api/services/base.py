from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from anything_api.core.settings import AppSettings, get_app_settings


class BaseService:
    """
    Request-scoped service: business rules over one AsyncSession.

    Repositories built on `self.session` share its transaction, so a service
    can stage changes through several of them and commit once. `settings`
    defaults to the environment; tests may pass their own.
    """

    def __init__(self, session: AsyncSession, settings: AppSettings | None = None) -> None:
        self.session = session
        self.settings = settings or get_app_settings()
