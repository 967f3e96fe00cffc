import pytest

from household_access.app.use_cases.members import LeaveHouseholdUseCase, RemoveMemberUseCase
from household_access.domain import errors
from household_access.domain.entities import MembershipRole
from tests.unit.factories import lookup_by_user, make_membership


@pytest.mark.asyncio
async def test_owner_removes_member(mock_uow, clock, household, owner, plain_member):
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(
        owner, plain_member
    )

    use_case = RemoveMemberUseCase(mock_uow, clock)
    result = await use_case.execute("owner-1", household.id, "member-1")

    assert result.is_ok()
    assert result.value.status == "removed"
    assert result.value.member_count == 1

    assert plain_member.is_active is False
    assert household.member_count == 1

    mock_uow.audit_events.create.assert_called_once()
    audit = mock_uow.audit_events.create.call_args[0][0]
    assert audit.action == "member_removed"
    assert audit.event_metadata["removed_user_id"] == "member-1"

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_admin_cannot_remove_owner(mock_uow, clock, household, owner, admin):
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(owner, admin)

    result = await RemoveMemberUseCase(mock_uow, clock).execute(
        "admin-1", household.id, "owner-1"
    )

    assert result.is_err()
    assert result.error.code == errors.PERMISSION_DENIED
    assert result.error.message == "Insufficient permissions to remove this member"
    assert owner.is_active is True
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_manager_removes_plain_member(mock_uow, clock, household, plain_member):
    manager = make_membership(
        household.id,
        "admin-2",
        MembershipRole.admin,
        permissions={"can_manage_members": True},
    )
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(
        manager, plain_member
    )

    result = await RemoveMemberUseCase(mock_uow, clock).execute(
        "admin-2", household.id, "member-1"
    )

    assert result.is_ok()
    assert plain_member.is_active is False


@pytest.mark.asyncio
async def test_inactive_target_is_not_found(mock_uow, clock, household, owner, plain_member):
    plain_member.is_active = False
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(
        owner, plain_member
    )

    result = await RemoveMemberUseCase(mock_uow, clock).execute(
        "owner-1", household.id, "member-1"
    )

    assert result.is_err()
    assert result.error.code == errors.MEMBERSHIP_NOT_FOUND


@pytest.mark.asyncio
async def test_inactive_actor_is_not_a_member(mock_uow, clock, household, owner, plain_member):
    owner.is_active = False
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(
        owner, plain_member
    )

    result = await RemoveMemberUseCase(mock_uow, clock).execute(
        "owner-1", household.id, "member-1"
    )

    assert result.is_err()
    assert result.error.code == errors.NOT_A_MEMBER


@pytest.mark.asyncio
async def test_missing_household(mock_uow, clock, household):
    mock_uow.households.get_by_id_for_update.return_value = None

    result = await RemoveMemberUseCase(mock_uow, clock).execute(
        "owner-1", household.id, "member-1"
    )

    assert result.is_err()
    assert result.error.code == errors.HOUSEHOLD_NOT_FOUND


@pytest.mark.asyncio
async def test_last_owner_cannot_leave(mock_uow, clock, household, owner):
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(owner)
    mock_uow.memberships.count_active_owners.return_value = 1

    result = await LeaveHouseholdUseCase(mock_uow, clock).execute("owner-1", household.id)

    assert result.is_err()
    assert result.error.code == errors.LAST_OWNER_PROTECTED
    assert owner.is_active is True
    assert household.member_count == 2


@pytest.mark.asyncio
async def test_owner_leaves_when_co_owner_exists(mock_uow, clock, household, owner):
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(owner)
    mock_uow.memberships.count_active_owners.return_value = 2

    result = await LeaveHouseholdUseCase(mock_uow, clock).execute("owner-1", household.id)

    assert result.is_ok()
    assert result.value.status == "left"
    assert owner.is_active is False

    audit = mock_uow.audit_events.create.call_args[0][0]
    assert audit.action == "member_left"


@pytest.mark.asyncio
async def test_member_count_never_negative(mock_uow, clock, household, owner, plain_member):
    household.member_count = 0
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(
        owner, plain_member
    )

    result = await RemoveMemberUseCase(mock_uow, clock).execute(
        "owner-1", household.id, "member-1"
    )

    assert result.is_ok()
    assert household.member_count == 0
