"""
List Members Use Case
"""

from uuid import UUID

from household_access.app.services.authorization import require_active_membership
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.libs.result import Result, Return

from .dtos import MemberInfo, MemberListResponse


class ListMembersUseCase:
    """
    Use case for listing the active members of a household.

    Business Rules:
    - Caller must be an active member
    - Inactive memberships are not listed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, household_id: UUID) -> Result[MemberListResponse]:
        async with self.uow:
            membership_result = await require_active_membership(
                self.uow, household_id, user_id
            )
            if membership_result.is_err():
                return membership_result

            memberships = await self.uow.memberships.get_by_household_id(
                household_id, active_only=True
            )

            return Return.ok(
                MemberListResponse(
                    members=[MemberInfo.from_membership(m) for m in memberships]
                )
            )
