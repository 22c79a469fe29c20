import secrets
from datetime import datetime, timedelta, timezone

from pwdlib import PasswordHash

# Argon2id with pwdlib's recommended parameters
password_hash = PasswordHash.recommended()

SESSION_TOKEN_BYTES = 32


def hash_password(password: str) -> str:
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return password_hash.verify(plain_password, hashed_password)


def generate_session_token() -> str:
    """Opaque cookie value, URL-safe."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def session_expires_at(hours: int, *, now: datetime | None = None) -> datetime:
    """Expiry timestamp (UTC) for a session opened at ``now``."""
    return (now or datetime.now(timezone.utc)) + timedelta(hours=hours)
