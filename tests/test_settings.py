import pytest

from anything_api.core.settings import AppSettings
from anything_api.db.config import Settings


@pytest.fixture(autouse=True)
def _clean_db_env(monkeypatch):
    for name in ("POSTGRES_URL", "POSTGRES_USER", "POSTGRES_PASSWORD", "POSTGRES_DB", "POSTGRES_HOST", "POSTGRES_PORT"):
        monkeypatch.delenv(name, raising=False)


def _settings(**values) -> Settings:
    return Settings(_env_file=None, **values)


def test_url_built_from_parts():
    settings = _settings(POSTGRES_USER="app", POSTGRES_PASSWORD="pw", POSTGRES_DB="anything", POSTGRES_HOST="db")
    assert settings.database_url == "postgresql://app:pw@db:5432/anything"
    assert settings.async_database_url == "postgresql+asyncpg://app:pw@db:5432/anything"


def test_missing_configuration_raises():
    with pytest.raises(ValueError):
        _ = _settings().database_url


@pytest.mark.parametrize(
    "url",
    [
        "postgres://u:p@h/db",
        "postgresql://u:p@h/db",
        "postgresql+psycopg2://u:p@h/db",
    ],
)
def test_async_url_uses_asyncpg(url):
    assert _settings(POSTGRES_URL=url).async_database_url == "postgresql+asyncpg://u:p@h/db"


def test_sync_url_strips_driver():
    assert _settings(POSTGRES_URL="postgresql+asyncpg://u:p@h/db").sync_database_url == "postgresql://u:p@h/db"


def test_non_postgres_url_unchanged():
    url = "sqlite+aiosqlite:///./local.db"
    assert _settings(POSTGRES_URL=url).async_database_url == url


def test_cors_origins_comma_separated():
    settings = AppSettings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test")
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_token_lifetimes_default():
    settings = AppSettings(_env_file=None)
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 15
    assert settings.REFRESH_TOKEN_EXPIRE_DAYS == 7
    assert settings.JWT_ISSUER == "Anything.API"
    assert settings.JWT_AUDIENCE == "Anything.Frontend"


def test_cors_origins_comma_separated_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test,http://b.test")
    settings = AppSettings(_env_file=None)
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_json_array_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["http://a.test", "http://b.test"]')
    settings = AppSettings(_env_file=None)
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_admin_email_domain_is_normalised(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAIL", "Boss@Example.COM")
    settings = AppSettings(_env_file=None)
    assert settings.ADMIN_EMAIL == "Boss@example.com"
