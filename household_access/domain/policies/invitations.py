"""
Invitation state helpers.

Expiry is evaluated when an invitation is read; nothing sweeps expired
invitations in the background.
"""

import secrets
from datetime import datetime, timedelta

from household_access.domain.entities import Invitation, InvitationStatus

DEFAULT_INVITATION_TTL_HOURS = 72


def generate_invite_token() -> str:
    return secrets.token_urlsafe(32)


def compute_expiry(now: datetime, ttl_hours: int) -> datetime:
    return now + timedelta(hours=ttl_hours)


def is_lazily_expired(invitation: Invitation, now: datetime) -> bool:
    """Stored as pending but past its expiry"""
    return invitation.status == InvitationStatus.pending and now > invitation.expires_at


def effective_status(invitation: Invitation, now: datetime) -> InvitationStatus:
    if is_lazily_expired(invitation, now):
        return InvitationStatus.expired
    return InvitationStatus(invitation.status)


def is_effectively_pending(invitation: Invitation, now: datetime) -> bool:
    return effective_status(invitation, now) == InvitationStatus.pending
