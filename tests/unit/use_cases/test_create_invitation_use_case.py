from datetime import timedelta

import pytest

from household_access.app.use_cases.invitations import CreateInvitationUseCase
from household_access.domain import errors
from household_access.domain.entities import InvitationStatus, MembershipRole
from tests.unit.factories import NOW, lookup_by_user, make_invitation


@pytest.fixture
def ready_uow(mock_uow, household, owner):
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(owner)
    mock_uow.memberships.get_active_by_household_and_email.return_value = None
    mock_uow.invitations.get_pending_by_household_and_email.return_value = []
    return mock_uow


@pytest.mark.asyncio
async def test_owner_invites(ready_uow, clock, household):
    use_case = CreateInvitationUseCase(ready_uow, clock, ttl_hours=72)
    result = await use_case.execute("owner-1", household.id, "new@example.com", "admin")

    assert result.is_ok()
    response = result.value
    assert response.status == "pending"
    assert response.role == "admin"
    assert response.invite_token
    assert response.expires_at == NOW + timedelta(hours=72)

    invitation = ready_uow.invitations.create.call_args[0][0]
    assert invitation.email == "new@example.com"
    assert invitation.invited_by == "owner-1"
    assert invitation.role == MembershipRole.admin

    audit = ready_uow.audit_events.create.call_args[0][0]
    assert audit.action == "invite_sent"
    ready_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_owner_role_cannot_be_invited(ready_uow, clock, household):
    result = await CreateInvitationUseCase(ready_uow, clock).execute(
        "owner-1", household.id, "new@example.com", "owner"
    )

    assert result.is_err()
    assert result.error.code == errors.INVALID_ROLE


@pytest.mark.asyncio
async def test_member_without_permission_cannot_invite(mock_uow, clock, household, plain_member):
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(plain_member)

    result = await CreateInvitationUseCase(mock_uow, clock).execute(
        "member-1", household.id, "new@example.com"
    )

    assert result.is_err()
    assert result.error.code == errors.PERMISSION_DENIED
    assert result.error.reason == "User does not have can_invite_members permission"


@pytest.mark.asyncio
async def test_non_member_cannot_invite(mock_uow, clock, household):
    mock_uow.memberships.get_by_household_and_user.return_value = None

    result = await CreateInvitationUseCase(mock_uow, clock).execute(
        "stranger", household.id, "new@example.com"
    )

    assert result.is_err()
    assert result.error.code == errors.NOT_A_MEMBER


@pytest.mark.asyncio
async def test_existing_member_email(ready_uow, clock, household, admin):
    ready_uow.memberships.get_active_by_household_and_email.return_value = admin

    result = await CreateInvitationUseCase(ready_uow, clock).execute(
        "owner-1", household.id, "admin@example.com"
    )

    assert result.is_err()
    assert result.error.code == errors.ALREADY_MEMBER


@pytest.mark.asyncio
async def test_full_household(ready_uow, clock, household):
    household.settings = {"max_members": 2}

    result = await CreateInvitationUseCase(ready_uow, clock).execute(
        "owner-1", household.id, "new@example.com"
    )

    assert result.is_err()
    assert result.error.code == errors.MEMBER_LIMIT_REACHED
    ready_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_pending_invitation(ready_uow, clock, household):
    ready_uow.invitations.get_pending_by_household_and_email.return_value = [
        make_invitation(household.id, email="new@example.com")
    ]

    result = await CreateInvitationUseCase(ready_uow, clock).execute(
        "owner-1", household.id, "new@example.com"
    )

    assert result.is_err()
    assert result.error.code == errors.INVITE_ALREADY_EXISTS


@pytest.mark.asyncio
async def test_lapsed_invitation_does_not_block(ready_uow, clock, household):
    lapsed = make_invitation(
        household.id, email="new@example.com", expires_at=NOW - timedelta(hours=1)
    )
    ready_uow.invitations.get_pending_by_household_and_email.return_value = [lapsed]

    result = await CreateInvitationUseCase(ready_uow, clock).execute(
        "owner-1", household.id, "new@example.com"
    )

    assert result.is_ok()
    assert lapsed.status == InvitationStatus.expired
    ready_uow.invitations.update.assert_called_once_with(lapsed)


@pytest.mark.asyncio
async def test_zero_ttl_is_not_replaced_by_default(ready_uow, clock, household):
    result = await CreateInvitationUseCase(ready_uow, clock, ttl_hours=72).execute(
        "owner-1", household.id, "new@example.com", ttl_hours=0
    )

    assert result.is_err()
    assert result.error.code == errors.INVALID_TTL
    ready_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_negative_configured_ttl_is_rejected(ready_uow, clock, household):
    result = await CreateInvitationUseCase(ready_uow, clock, ttl_hours=-1).execute(
        "owner-1", household.id, "new@example.com"
    )

    assert result.is_err()
    assert result.error.code == errors.INVALID_TTL


@pytest.mark.asyncio
async def test_ttl_override_is_used(ready_uow, clock, household):
    result = await CreateInvitationUseCase(ready_uow, clock, ttl_hours=72).execute(
        "owner-1", household.id, "new@example.com", ttl_hours=1
    )

    assert result.is_ok()
    assert result.value.expires_at == NOW + timedelta(hours=1)
