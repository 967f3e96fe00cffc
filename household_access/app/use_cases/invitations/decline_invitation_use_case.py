"""
Decline Invitation Use Case
"""

import logging
from typing import Optional

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, InvitationStatus
from household_access.domain.policies import is_lazily_expired
from household_access.libs.result import Error, Result, Return

from .dtos import InvitationStatusResponse

logger = logging.getLogger(__name__)


class DeclineInvitationUseCase:
    """
    Use case for declining an invitation.

    Business Rules:
    - Holding the token is enough to decline
    - Only pending invitations can be declined
    - A lapsed pending invitation is persisted as expired and rejected
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, token: str, user_id: Optional[str] = None
    ) -> Result[InvitationStatusResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(
                    Error(errors.INVITATION_NOT_FOUND, "Invitation not found")
                )

            now = self.clock()

            if is_lazily_expired(invitation, now):
                invitation.status = InvitationStatus.expired
                invitation.updated_at = now
                await self.uow.invitations.update(invitation)
                await self.uow.commit()

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        errors.INVITATION_NOT_PENDING,
                        f"Invitation is {InvitationStatus(invitation.status).value}",
                    )
                )

            invitation.status = InvitationStatus.declined
            invitation.updated_at = now
            await self.uow.invitations.update(invitation)

            audit = AuditEvent(
                household_id=invitation.household_id,
                user_id=user_id,
                action="invite_declined",
                event_metadata={"invitation_id": str(invitation.id)},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} declined")

            return Return.ok(
                InvitationStatusResponse(
                    invitation_id=str(invitation.id),
                    status=InvitationStatus.declined.value,
                )
            )
