"""
Credential primitives: password digests, one-time codes, session tokens.
"""

import hashlib
import hmac
import secrets
import uuid
from datetime import datetime, timedelta
from typing import Optional


OTP_MIN = 100000
OTP_MAX = 999999


def hash_password(password: str) -> str:
    """
    Hex SHA-256 digest of a password.

    Unsalted single iteration, matching records written by earlier
    deployments of the same user table.
    """
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(candidate: str, stored_hash: str) -> bool:
    """Compare a candidate password against a stored digest in constant time."""
    if not stored_hash:
        return False
    return hmac.compare_digest(hash_password(candidate), stored_hash)


def generate_otp() -> str:
    """Six-digit numeric code in [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def otp_matches(candidate: str, stored: str) -> bool:
    return hmac.compare_digest(candidate.encode("utf-8"), stored.encode("utf-8"))


def issue_session_token() -> str:
    """Opaque random bearer token (UUID4, 122 random bits)."""
    return str(uuid.uuid4())


def otp_expiry(now: datetime, ttl_minutes: int) -> datetime:
    return now + timedelta(minutes=ttl_minutes)


def session_expiry(now: datetime, ttl_days: int) -> datetime:
    return now + timedelta(days=ttl_days)


def is_expired(expiry: Optional[datetime], now: datetime) -> bool:
    """True once now has reached the expiry instant. No expiry never expires."""
    if expiry is None:
        return False
    return now >= expiry
