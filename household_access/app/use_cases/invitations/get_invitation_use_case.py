"""
Get Invitation Use Case

Looks an invitation up by token so the invitee can review it.
"""

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.libs.result import Error, Result, Return

from .dtos import InvitationDetailResponse


class GetInvitationUseCase:
    """Read-only; reports the effective status without persisting it."""

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[InvitationDetailResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(
                    Error(errors.INVITATION_NOT_FOUND, "Invitation not found")
                )

            household = await self.uow.households.get_by_id(invitation.household_id)

            return Return.ok(
                InvitationDetailResponse.from_invitation(
                    invitation,
                    self.clock(),
                    household_name=household.name if household else None,
                )
            )
