from datetime import datetime, timedelta
from uuid import uuid4

from household_access.domain.entities import Invitation, InvitationStatus, MembershipRole
from household_access.domain.policies import (
    compute_expiry,
    effective_status,
    generate_invite_token,
    is_effectively_pending,
    is_lazily_expired,
)

NOW = datetime(2024, 6, 1, 12, 0, 0)


def make_invitation(status=InvitationStatus.pending, expires_at=None):
    return Invitation(
        id=uuid4(),
        household_id=uuid4(),
        email="invitee@example.com",
        role=MembershipRole.member,
        invited_by="owner-1",
        invite_token=generate_invite_token(),
        status=status,
        expires_at=expires_at or compute_expiry(NOW, 72),
    )


def test_expiry_is_ttl_after_now():
    assert compute_expiry(NOW, 72) == NOW + timedelta(hours=72)


def test_tokens_are_unique_and_fit_column():
    tokens = {generate_invite_token() for _ in range(50)}

    assert len(tokens) == 50
    assert all(len(token) <= 64 for token in tokens)


def test_pending_before_expiry():
    invitation = make_invitation()

    assert effective_status(invitation, NOW) == InvitationStatus.pending
    assert is_effectively_pending(invitation, NOW)


def test_pending_after_expiry_reads_expired():
    invitation = make_invitation()
    later = NOW + timedelta(hours=73)

    assert is_lazily_expired(invitation, later)
    assert effective_status(invitation, later) == InvitationStatus.expired
    assert not is_effectively_pending(invitation, later)
    # stored value is untouched
    assert invitation.status == InvitationStatus.pending


def test_terminal_states_are_not_lazily_expired():
    invitation = make_invitation(
        status=InvitationStatus.accepted, expires_at=NOW - timedelta(hours=1)
    )

    assert not is_lazily_expired(invitation, NOW)
    assert effective_status(invitation, NOW) == InvitationStatus.accepted
