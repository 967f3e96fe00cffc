"""
Check Member Limit Use Case
"""

from typing import Optional
from uuid import UUID

from household_access.app.services.authorization import require_active_membership
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.policies import MemberLimit, check_member_limit
from household_access.libs.result import Error, Result, Return


class CheckMemberLimitUseCase:
    """
    Use case for reading the household's member capacity.

    When user_id is given the caller must be an active member.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, household_id: UUID, user_id: Optional[str] = None
    ) -> Result[MemberLimit]:
        async with self.uow:
            household = await self.uow.households.get_by_id(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            if user_id is not None:
                membership_result = await require_active_membership(
                    self.uow, household_id, user_id
                )
                if membership_result.is_err():
                    return membership_result

            return Return.ok(check_member_limit(household))
