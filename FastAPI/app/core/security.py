import hashlib
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from app.config import settings

# Alphabet of the mocked meeting provider's room identifiers.
MEETING_TOKEN_ALPHABET = "abcdefn12356hjlqstv89"
MEETING_TOKEN_LENGTH = 20


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    role: str


def _prehash(password: str) -> bytes:
    """Pre-hash to avoid bcrypt's 72-byte limit."""
    return hashlib.sha256(password.encode()).digest()


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=settings.bcrypt_rounds)).decode()


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(_prehash(plain), hashed.encode())


def create_access_token(user_id: int, role: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {"sub": str(user_id), "role": role, "exp": expire}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenClaims | None:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
    subject = payload.get("sub")
    role = payload.get("role")
    if subject is None or role is None:
        return None
    try:
        return TokenClaims(user_id=int(subject), role=role)
    except (TypeError, ValueError):
        return None


def generate_meeting_token(length: int = MEETING_TOKEN_LENGTH) -> str:
    """Random room id, sampled with replacement; uniqueness is not guaranteed."""
    return "".join(secrets.choice(MEETING_TOKEN_ALPHABET) for _ in range(length))
