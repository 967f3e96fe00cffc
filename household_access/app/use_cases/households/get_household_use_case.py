"""
Get Household Use Case

Loads a household with its active members for one of its members.
"""

from uuid import UUID

from household_access.app.services.authorization import require_active_membership
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.app.use_cases.members.dtos import MemberInfo
from household_access.domain import errors
from household_access.domain.entities import MembershipRole, Permission
from household_access.domain.policies import has_permission
from household_access.libs.result import Error, Result, Return

from .dtos import HouseholdDetailResponse, HouseholdResponse


class GetHouseholdUseCase:
    """
    Use case for reading a household.

    Business Rules:
    - Caller must be an active member
    - Only active memberships are listed
    - The invite code is shown to members with can_invite_members
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, household_id: UUID
    ) -> Result[HouseholdDetailResponse]:
        async with self.uow:
            household = await self.uow.households.get_by_id(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            membership_result = await require_active_membership(
                self.uow, household_id, user_id
            )
            if membership_result.is_err():
                return membership_result

            membership = membership_result.value
            memberships = await self.uow.memberships.get_by_household_id(
                household_id, active_only=True
            )

            response = HouseholdDetailResponse(
                **HouseholdResponse.from_household(household).model_dump(),
                role=MembershipRole(membership.role).value,
                members=[MemberInfo.from_membership(m) for m in memberships],
            )
            if has_permission(membership, Permission.can_invite_members).has_permission:
                response.invite_code = household.invite_code
                response.invite_code_expires_at = household.invite_code_expires_at

            return Return.ok(response)
