import pytest

from household_access.app.use_cases.households import (
    CreateHouseholdUseCase,
    DeleteHouseholdUseCase,
    UpdateHouseholdSettingsUseCase,
)
from household_access.domain import errors
from household_access.domain.entities import MembershipRole
from tests.unit.factories import NOW, lookup_by_user


@pytest.mark.asyncio
async def test_create_household_makes_creator_owner(mock_uow, clock):
    use_case = CreateHouseholdUseCase(
        mock_uow, clock, default_settings={"max_members": 6, "low_stock_threshold": 3}
    )
    result = await use_case.execute("user-1", "user@example.com", "  Beach House ")

    assert result.is_ok()
    assert result.value.name == "Beach House"
    assert result.value.member_count == 1
    assert result.value.settings.max_members == 6
    assert result.value.settings.low_stock_threshold == 3

    membership = mock_uow.memberships.create.call_args[0][0]
    assert membership.user_id == "user-1"
    assert membership.role == MembershipRole.owner
    assert membership.joined_at == NOW

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_household_requires_name(mock_uow, clock):
    result = await CreateHouseholdUseCase(mock_uow, clock).execute("user-1", None, "   ")

    assert result.is_err()
    assert result.error.code == errors.INVALID_NAME
    mock_uow.households.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_household_rejects_bad_settings(mock_uow, clock):
    result = await CreateHouseholdUseCase(mock_uow, clock).execute(
        "user-1", None, "Home", settings={"max_members": 0}
    )

    assert result.is_err()
    assert result.error.code == errors.INVALID_SETTINGS


@pytest.mark.asyncio
async def test_update_settings_merges(mock_uow, clock, household, owner):
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(owner)
    mock_uow.households.get_by_id_for_update.return_value = household

    result = await UpdateHouseholdSettingsUseCase(mock_uow, clock).execute(
        "owner-1", household.id, settings={"currency": "EUR"}
    )

    assert result.is_ok()
    assert household.settings["currency"] == "EUR"
    assert household.settings["max_members"] == 10


@pytest.mark.asyncio
async def test_max_members_below_count_rejected(mock_uow, clock, household, owner):
    household.member_count = 4
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(owner)
    mock_uow.households.get_by_id_for_update.return_value = household

    result = await UpdateHouseholdSettingsUseCase(mock_uow, clock).execute(
        "owner-1", household.id, settings={"max_members": 3}
    )

    assert result.is_err()
    assert result.error.code == errors.INVALID_SETTINGS
    assert household.settings["max_members"] == 10


@pytest.mark.asyncio
async def test_member_cannot_edit_settings(mock_uow, clock, household, plain_member):
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(plain_member)

    result = await UpdateHouseholdSettingsUseCase(mock_uow, clock).execute(
        "member-1", household.id, name="Renamed"
    )

    assert result.is_err()
    assert result.error.code == errors.PERMISSION_DENIED


@pytest.mark.asyncio
async def test_delete_household_deactivates_members(
    mock_uow, clock, household, owner, plain_member
):
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(owner)
    mock_uow.households.get_by_id_for_update.return_value = household
    mock_uow.memberships.get_by_household_id.return_value = [owner, plain_member]

    result = await DeleteHouseholdUseCase(mock_uow, clock).execute("owner-1", household.id)

    assert result.is_ok()
    assert result.value.memberships_deactivated == 2
    assert household.is_active is False
    assert household.deleted_at == NOW
    assert household.member_count == 0
    assert owner.is_active is False
    assert plain_member.is_active is False


@pytest.mark.asyncio
async def test_admin_cannot_delete_household(mock_uow, clock, household, admin):
    mock_uow.memberships.get_by_household_and_user.side_effect = lookup_by_user(admin)

    result = await DeleteHouseholdUseCase(mock_uow, clock).execute("admin-1", household.id)

    assert result.is_err()
    assert result.error.code == errors.PERMISSION_DENIED
    assert household.is_active is True
