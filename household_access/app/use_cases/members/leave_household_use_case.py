"""
Leave Household Use Case
"""

from uuid import UUID

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain.clock import Clock, utcnow
from household_access.libs.result import Result

from .dtos import RemoveMemberResponse
from .remove_member_use_case import RemoveMemberUseCase


class LeaveHouseholdUseCase:
    """Self-removal; the last active owner cannot leave."""

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: str, household_id: UUID) -> Result[RemoveMemberResponse]:
        return await RemoveMemberUseCase(self.uow, self.clock).execute(
            actor_user_id=user_id,
            household_id=household_id,
            target_user_id=user_id,
        )
