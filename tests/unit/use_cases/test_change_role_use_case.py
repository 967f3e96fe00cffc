import pytest

from household_access.app.use_cases.members import ChangeRoleUseCase
from household_access.domain import errors
from household_access.domain.entities import MembershipRole
from tests.unit.factories import lookup_by_user, make_membership


@pytest.mark.asyncio
async def test_owner_promotes_member_to_admin(mock_uow, clock, household, owner, plain_member):
    plain_member.permissions = {"can_manage_inventory": True}
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(
        owner, plain_member
    )

    result = await ChangeRoleUseCase(mock_uow, clock).execute(
        "owner-1", household.id, "member-1", "admin"
    )

    assert result.is_ok()
    assert plain_member.role == MembershipRole.admin
    # overrides survive a role change
    assert result.value.membership.permission_overrides == {"can_manage_inventory": True}
    assert result.value.membership.permissions["can_invite_members"] is True

    audit = mock_uow.audit_events.create.call_args[0][0]
    assert audit.action == "role_changed"
    assert audit.event_metadata == {
        "target_user_id": "member-1",
        "old_role": "member",
        "new_role": "admin",
    }
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_manager_cannot_change_roles(mock_uow, clock, household, plain_member):
    manager = make_membership(
        household.id, "admin-2", MembershipRole.admin, permissions={"can_manage_members": True}
    )
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(
        manager, plain_member
    )

    result = await ChangeRoleUseCase(mock_uow, clock).execute(
        "admin-2", household.id, "member-1", "admin"
    )

    assert result.is_err()
    assert result.error.code == errors.PERMISSION_DENIED
    assert result.error.message == "Only owners can change member roles"
    assert plain_member.role == MembershipRole.member


@pytest.mark.asyncio
async def test_admin_cannot_promote_self(mock_uow, clock, household, admin):
    admin.permissions = {"can_manage_members": True}
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(admin)

    result = await ChangeRoleUseCase(mock_uow, clock).execute(
        "admin-1", household.id, "admin-1", "owner"
    )

    assert result.is_err()
    assert result.error.code == errors.SELF_ESCALATION_DENIED
    assert admin.role == MembershipRole.admin


@pytest.mark.asyncio
async def test_invalid_role(mock_uow, clock, household):
    result = await ChangeRoleUseCase(mock_uow, clock).execute(
        "owner-1", household.id, "member-1", "viewer"
    )

    assert result.is_err()
    assert result.error.code == errors.INVALID_ROLE
    mock_uow.households.get_by_id_for_update.assert_not_called()
