"""
Revoke Invitation Use Case

Withdraws a pending invitation before it is used.
"""

import logging
from uuid import UUID

from household_access.app.services.authorization import require_invitation_manager
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, InvitationStatus
from household_access.domain.policies import is_effectively_pending
from household_access.libs.result import Error, Result, Return

from .dtos import InvitationStatusResponse

logger = logging.getLogger(__name__)


class RevokeInvitationUseCase:
    """
    Use case for revoking an invitation.

    Business Rules:
    - Allowed for the original inviter or a member with can_invite_members
    - Only effectively pending invitations can be revoked
    - A revoked invitation is stored as expired
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, user_id: str, household_id: UUID, invitation_id: UUID
    ) -> Result[InvitationStatusResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.household_id != household_id:
                return Return.err(
                    Error(errors.INVITATION_NOT_FOUND, "Invitation not found")
                )

            auth_result = await require_invitation_manager(self.uow, invitation, user_id)
            if auth_result.is_err():
                return auth_result

            now = self.clock()
            was_pending = is_effectively_pending(invitation, now)

            if invitation.status == InvitationStatus.pending:
                invitation.status = InvitationStatus.expired
                invitation.updated_at = now
                await self.uow.invitations.update(invitation)

            if not was_pending:
                # Persist a lapsed invitation before rejecting
                await self.uow.commit()
                return Return.err(
                    Error(
                        errors.INVITATION_NOT_PENDING,
                        f"Invitation is {InvitationStatus(invitation.status).value}",
                    )
                )

            audit = AuditEvent(
                household_id=household_id,
                user_id=user_id,
                action="invite_revoked",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "invited_email": invitation.email,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} revoked by {user_id}")

            return Return.ok(
                InvitationStatusResponse(
                    invitation_id=str(invitation.id),
                    status=InvitationStatus.expired.value,
                )
            )
