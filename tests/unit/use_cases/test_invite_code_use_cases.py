from datetime import timedelta

import pytest

from household_access.app.use_cases.households import (
    JoinByCodeUseCase,
    RegenerateInviteCodeUseCase,
)
from household_access.domain import errors
from household_access.domain.entities import MembershipRole
from tests.unit.factories import NOW, lookup_by_user, make_household, make_membership


@pytest.fixture
def coded_household():
    return make_household(
        member_count=2,
        max_members=3,
        invite_code="JOINME23",
        invite_code_expires_at=NOW + timedelta(days=10),
    )


@pytest.fixture
def join_uow(mock_uow, coded_household):
    mock_uow.households.get_active_by_invite_code.return_value = coded_household
    mock_uow.households.get_by_id_for_update.return_value = coded_household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user()
    return mock_uow


@pytest.mark.asyncio
async def test_join_creates_member(join_uow, clock, coded_household):
    result = await JoinByCodeUseCase(join_uow, clock).execute(
        "newbie", "newbie@example.com", " joinme23 "
    )

    assert result.is_ok()
    assert result.value.status == "joined"
    assert result.value.household.role == "member"
    assert coded_household.member_count == 3

    join_uow.households.get_active_by_invite_code.assert_called_once_with("JOINME23")
    membership = join_uow.memberships.create.call_args[0][0]
    assert membership.user_id == "newbie"
    assert membership.role == MembershipRole.member
    assert membership.is_active is True

    audit = join_uow.audit_events.create.call_args[0][0]
    assert audit.action == "member_joined"
    join_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_join_reactivates_former_member_as_member(join_uow, clock, coded_household):
    former = make_membership(
        coded_household.id,
        "former",
        MembershipRole.admin,
        permissions={"can_manage_members": True},
        is_active=False,
    )
    join_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(former)

    result = await JoinByCodeUseCase(join_uow, clock).execute(
        "former", "former@example.com", "JOINME23"
    )

    assert result.is_ok()
    assert former.is_active is True
    assert former.role == MembershipRole.member
    assert former.permissions is None
    assert coded_household.member_count == 3
    join_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_code(mock_uow, clock):
    mock_uow.households.get_active_by_invite_code.return_value = None

    result = await JoinByCodeUseCase(mock_uow, clock).execute("newbie", None, "NOPE")

    assert result.is_err()
    assert result.error.code == errors.INVALID_INVITE_CODE


@pytest.mark.asyncio
async def test_blank_code(mock_uow, clock):
    result = await JoinByCodeUseCase(mock_uow, clock).execute("newbie", None, "   ")

    assert result.is_err()
    assert result.error.code == errors.INVALID_INVITE_CODE
    mock_uow.households.get_active_by_invite_code.assert_not_called()


@pytest.mark.asyncio
async def test_expired_code(join_uow, clock, coded_household):
    coded_household.invite_code_expires_at = NOW - timedelta(minutes=1)

    result = await JoinByCodeUseCase(join_uow, clock).execute("newbie", None, "JOINME23")

    assert result.is_err()
    assert result.error.code == errors.INVITE_CODE_EXPIRED
    join_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_active_member_cannot_join_again(join_uow, clock, coded_household, plain_member):
    join_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(plain_member)

    result = await JoinByCodeUseCase(join_uow, clock).execute("member-1", None, "JOINME23")

    assert result.is_err()
    assert result.error.code == errors.ALREADY_MEMBER


@pytest.mark.asyncio
async def test_member_limit_checked_on_locked_row(join_uow, clock, coded_household):
    # The unlocked lookup saw a free slot; the locked row is full
    locked = make_household(
        id=coded_household.id,
        member_count=3,
        max_members=3,
        invite_code="JOINME23",
        invite_code_expires_at=NOW + timedelta(days=10),
    )
    join_uow.households.get_by_id_for_update.return_value = locked

    result = await JoinByCodeUseCase(join_uow, clock).execute("newbie", None, "JOINME23")

    assert result.is_err()
    assert result.error.code == errors.MEMBER_LIMIT_REACHED
    join_uow.households.get_by_id_for_update.assert_called_once_with(coded_household.id)
    join_uow.memberships.create.assert_not_called()


@pytest.mark.asyncio
async def test_regenerate_replaces_code(mock_uow, clock, coded_household, owner):
    mock_uow.households.get_by_id_for_update.return_value = coded_household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(owner)

    result = await RegenerateInviteCodeUseCase(mock_uow, clock, ttl_days=30).execute(
        "owner-1", coded_household.id
    )

    assert result.is_ok()
    assert result.value.invite_code != "JOINME23"
    assert coded_household.invite_code == result.value.invite_code
    assert result.value.expires_at == NOW + timedelta(days=30)

    audit = mock_uow.audit_events.create.call_args[0][0]
    assert audit.action == "invite_code_regenerated"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_plain_member_cannot_regenerate(mock_uow, clock, coded_household, plain_member):
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(plain_member)

    result = await RegenerateInviteCodeUseCase(mock_uow, clock).execute(
        "member-1", coded_household.id
    )

    assert result.is_err()
    assert result.error.code == errors.PERMISSION_DENIED
    assert coded_household.invite_code == "JOINME23"
