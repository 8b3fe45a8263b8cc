from datetime import datetime, timedelta, timezone

import pytest
from jose import JWTError, jwt

from anything_api.core.security import (
    create_access_token,
    decode_token,
    generate_invite_token,
    generate_refresh_token,
    get_password_hash,
    verify_password,
)
from anything_api.core.settings import get_app_settings


def test_password_hash_roundtrip():
    hashed = get_password_hash("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("other", hashed)


def test_access_token_claims():
    token = create_access_token(user_id=42, email="a@example.com", name="A", role="User")
    claims = decode_token(token)
    settings = get_app_settings()
    assert claims["sub"] == "42"
    assert claims["iss"] == settings.JWT_ISSUER
    assert claims["aud"] == settings.JWT_AUDIENCE


def test_expired_token_rejected():
    token = create_access_token(user_id=1, email="a@example.com", name="A", role="User", expires_minutes=-1)
    with pytest.raises(JWTError):
        decode_token(token)


def test_wrong_audience_rejected():
    settings = get_app_settings()
    now = datetime.now(tz=timezone.utc)
    token = jwt.encode(
        {"sub": "1", "iss": settings.JWT_ISSUER, "aud": "someone-else", "exp": now + timedelta(minutes=5), "type": "access"},
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )
    with pytest.raises(JWTError):
        decode_token(token)


def test_non_access_token_rejected():
    settings = get_app_settings()
    now = datetime.now(tz=timezone.utc)
    token = jwt.encode(
        {"sub": "1", "iss": settings.JWT_ISSUER, "aud": settings.JWT_AUDIENCE, "exp": now + timedelta(minutes=5), "type": "refresh"},
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )
    with pytest.raises(JWTError):
        decode_token(token)


def test_refresh_and_invite_tokens_are_random():
    assert generate_refresh_token() != generate_refresh_token()
    assert len(generate_refresh_token()) == 88
    assert generate_invite_token() != generate_invite_token()
