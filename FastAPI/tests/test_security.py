from datetime import datetime, timedelta, timezone

from jose import jwt

import app.core.security as sec
from app.config import settings


def test_password_hash_and_verify():
    hashed = sec.hash_password("password123")
    assert hashed != "password123"
    assert sec.verify_password("password123", hashed) is True
    assert sec.verify_password("wrong-pass", hashed) is False


def test_long_passwords_are_not_truncated():
    base = "x" * 80
    hashed = sec.hash_password(base + "a")
    assert sec.verify_password(base + "b", hashed) is False


def test_access_token_round_trip():
    token = sec.create_access_token(42, "RECRUITER")
    claims = sec.decode_access_token(token)
    assert claims == sec.TokenClaims(user_id=42, role="RECRUITER")


def test_access_token_expires_after_configured_minutes():
    token = sec.create_access_token(1, "RECRUIT")
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    expected = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    assert abs((exp - expected).total_seconds()) < 60


def test_decode_rejects_garbage_and_expired():
    assert sec.decode_access_token("not-a-token") is None
    expired = jwt.encode(
        {"sub": "1", "role": "RECRUIT", "exp": datetime.now(timezone.utc) - timedelta(minutes=1)},
        settings.secret_key,
        algorithm=settings.algorithm,
    )
    assert sec.decode_access_token(expired) is None


def test_decode_rejects_wrong_signature():
    token = jwt.encode({"sub": "1", "role": "RECRUIT"}, "another-key", algorithm=settings.algorithm)
    assert sec.decode_access_token(token) is None


def test_decode_requires_subject_and_role():
    no_role = jwt.encode({"sub": "1"}, settings.secret_key, algorithm=settings.algorithm)
    bad_sub = jwt.encode({"sub": "abc", "role": "RECRUIT"}, settings.secret_key, algorithm=settings.algorithm)
    assert sec.decode_access_token(no_role) is None
    assert sec.decode_access_token(bad_sub) is None


def test_meeting_token_shape():
    for _ in range(50):
        token = sec.generate_meeting_token()
        assert len(token) == 20
        assert set(token) <= set(sec.MEETING_TOKEN_ALPHABET)
    assert len(sec.MEETING_TOKEN_ALPHABET) == 21
    assert len(sec.generate_meeting_token(8)) == 8
