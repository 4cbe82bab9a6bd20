"""
Reset Code - Pure helpers for the 6-digit password reset code.
"""

import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..config import AuthDefaultConfig


def generate_reset_code(length: int = AuthDefaultConfig.RESET_CODE_LENGTH) -> str:
    """Random zero-padded numeric code, e.g. '048213'."""
    return str(secrets.randbelow(10 ** length)).zfill(length)


def expiry_from(now: datetime, ttl_minutes: int = AuthDefaultConfig.RESET_CODE_TTL_MINUTES) -> datetime:
    return as_utc(now) + timedelta(minutes=ttl_minutes)


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they were stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_expired(expires_at: Optional[datetime], now: datetime) -> bool:
    if expires_at is None:
        return True
    return as_utc(now) > as_utc(expires_at)


def code_matches(expected: Optional[str], supplied: Optional[str]) -> bool:
    if not expected or not supplied:
        return False
    return hmac.compare_digest(expected.encode('utf-8'), supplied.strip().encode('utf-8'))
