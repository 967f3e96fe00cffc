"""
Household invite code helpers.

Codes are short enough to read out loud; ambiguous characters (0/O, 1/I)
are left out of the alphabet.
"""

import secrets
from datetime import datetime, timedelta
from typing import Optional

from household_access.domain.entities import Household

INVITE_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
INVITE_CODE_LENGTH = 8
DEFAULT_INVITE_CODE_TTL_DAYS = 30


def generate_invite_code() -> str:
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(INVITE_CODE_LENGTH))


def normalize_invite_code(code: Optional[str]) -> str:
    return (code or "").strip().upper()


def invite_code_expiry(now: datetime, ttl_days: int) -> datetime:
    return now + timedelta(days=ttl_days)


def is_invite_code_expired(household: Household, now: datetime) -> bool:
    expires_at = household.invite_code_expires_at
    return expires_at is not None and now > expires_at
