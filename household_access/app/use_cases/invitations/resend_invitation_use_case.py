"""
Resend Invitation Use Case

Issues a fresh token and expiry for an invitation still stored as pending.
"""

import logging
from uuid import UUID

from household_access.app.services.authorization import require_invitation_manager
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, InvitationStatus
from household_access.domain.policies import (
    DEFAULT_INVITATION_TTL_HOURS,
    check_member_limit,
    compute_expiry,
    generate_invite_token,
)
from household_access.libs.result import Error, Result, Return

from .dtos import CreatedInvitationResponse

logger = logging.getLogger(__name__)


class ResendInvitationUseCase:
    """
    Use case for resending an invitation.

    Business Rules:
    - Same authorization as revoke
    - Only invitations stored as pending, lapsed or not
    - The old token stops working
    - The member limit is checked again
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock = utcnow,
        ttl_hours: int = DEFAULT_INVITATION_TTL_HOURS,
    ):
        self.uow = uow
        self.clock = clock
        self.ttl_hours = ttl_hours

    async def execute(
        self, user_id: str, household_id: UUID, invitation_id: UUID
    ) -> Result[CreatedInvitationResponse]:
        if self.ttl_hours <= 0:
            return Return.err(
                Error(errors.INVALID_TTL, "Invitation lifetime must be a positive number of hours")
            )

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.household_id != household_id:
                return Return.err(
                    Error(errors.INVITATION_NOT_FOUND, "Invitation not found")
                )

            auth_result = await require_invitation_manager(self.uow, invitation, user_id)
            if auth_result.is_err():
                return auth_result

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        errors.INVITATION_NOT_PENDING,
                        f"Invitation is {InvitationStatus(invitation.status).value}",
                    )
                )

            household = await self.uow.households.get_by_id_for_update(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            limit = check_member_limit(household)
            if not limit.can_add_members:
                return Return.err(Error(errors.MEMBER_LIMIT_REACHED, limit.reason))

            now = self.clock()

            invitation.invite_token = generate_invite_token()
            invitation.expires_at = compute_expiry(now, self.ttl_hours)
            invitation.updated_at = now
            invitation = await self.uow.invitations.update(invitation)

            audit = AuditEvent(
                household_id=household_id,
                user_id=user_id,
                action="invite_resent",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "invited_email": invitation.email,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} resent by {user_id}")

            return Return.ok(
                CreatedInvitationResponse.from_invitation(
                    invitation, now, invite_token=invitation.invite_token
                )
            )
