"""Unit tests for JWT helpers."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from gate.config import AuthSettings
from gate.util.jwt import JWTError, create_token, decode_token

SECRET = "jwt-helper-secret-0123456789abcdef"
ISSUED_AT = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> AuthSettings:
    return AuthSettings(jwt_secret=SECRET)


def test_create_token_carries_email_iat_exp(settings):
    token = create_token(
        "a@x.com", ISSUED_AT, ISSUED_AT + timedelta(hours=2), settings
    )

    claims = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})
    assert claims == {
        "email": "a@x.com",
        "iat": int(ISSUED_AT.timestamp()),
        "exp": int((ISSUED_AT + timedelta(hours=2)).timestamp()),
    }


def test_decode_token_ignores_expiry(settings):
    """Expiry is checked by the caller against its own clock."""
    token = create_token("a@x.com", ISSUED_AT, ISSUED_AT + timedelta(seconds=1), settings)

    payload = decode_token(token, settings)

    assert payload.email == "a@x.com"


def test_decode_token_rejects_other_key(settings):
    token = create_token("a@x.com", ISSUED_AT, ISSUED_AT + timedelta(hours=1), settings)

    with pytest.raises(JWTError):
        decode_token(token, AuthSettings(jwt_secret="another-secret-0123456789abcdef"))


def test_decode_token_requires_exp(settings):
    token = jwt.encode({"email": "a@x.com", "iat": 1}, SECRET, algorithm="HS256")

    with pytest.raises(JWTError, match="exp"):
        decode_token(token, settings)


def test_create_token_with_unknown_algorithm_raises(settings):
    bad = AuthSettings(jwt_secret=SECRET, jwt_algorithm="NOPE")

    with pytest.raises(JWTError):
        create_token("a@x.com", ISSUED_AT, ISSUED_AT + timedelta(hours=1), bad)
