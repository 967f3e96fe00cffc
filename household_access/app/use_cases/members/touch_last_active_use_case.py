from uuid import UUID

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain.clock import Clock, utcnow
from household_access.domain.policies import is_active_member
from household_access.libs.result import Result, Return

from .dtos import TouchLastActiveResponse


class TouchLastActiveUseCase:
    """Stamp last_active_at on the caller's active membership, if any."""

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, user_id: str, household_id: UUID) -> Result[TouchLastActiveResponse]:
        async with self.uow:
            membership = await self.uow.memberships.get_by_household_and_user(
                household_id, user_id
            )
            if not is_active_member(membership):
                return Return.ok(TouchLastActiveResponse(updated=False))

            membership.last_active_at = self.clock()
            await self.uow.memberships.update(membership)
            await self.uow.commit()

            return Return.ok(TouchLastActiveResponse(updated=True))
