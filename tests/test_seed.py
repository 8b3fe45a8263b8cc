from anything_api.core.security import verify_password
from anything_api.core.settings import AppSettings
from anything_api.db.seed import ensure_admin_user


async def test_admin_created_once(db_session):
    settings = AppSettings(_env_file=None, ADMIN_EMAIL="root@example.com", ADMIN_PASSWORD="Sup3rSecret!")
    first = await ensure_admin_user(db_session, settings=settings)
    assert first.role == "Admin"
    assert first.name == "Administrator"
    assert verify_password("Sup3rSecret!", first.password_hash)

    second = await ensure_admin_user(db_session, settings=settings)
    assert second.id == first.id


async def test_seed_skipped_without_credentials(db_session, monkeypatch):
    monkeypatch.delenv("ADMIN_EMAIL", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)
    assert await ensure_admin_user(db_session, settings=AppSettings(_env_file=None)) is None
