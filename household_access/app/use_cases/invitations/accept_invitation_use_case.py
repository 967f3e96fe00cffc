"""
Accept Invitation Use Case

Turns a pending invitation into an active membership.
"""

import logging
from typing import Optional

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.app.use_cases.households.dtos import HouseholdInfo
from household_access.app.use_cases.members.dtos import MemberInfo
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import (
    AuditEvent,
    InvitationStatus,
    Membership,
    MembershipRole,
)
from household_access.domain.policies import check_member_limit, is_lazily_expired
from household_access.libs.result import Error, Result, Return

from .dtos import AcceptInvitationResponse

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting an invitation.

    Business Logic:
    1. Look the invitation up by token
    2. A lapsed pending invitation is persisted as expired and rejected
    3. Only pending invitations can be accepted
    4. The accepting user's email must equal the invited email
    5. Lock the household row, reject if already an active member
    6. Re-check the member limit on the locked row
    7. Reactivate the previous membership or create a new one
    8. Mark the invitation accepted and bump member_count
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, token: str, user_id: str, email: Optional[str]
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            token: Invitation token
            user_id: Accepting user's id
            email: Accepting user's email from the identity provider

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
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

            if email is None or email != invitation.email:
                return Return.err(
                    Error(
                        errors.EMAIL_MISMATCH,
                        "This invitation was sent to a different email address",
                    )
                )

            household = await self.uow.households.get_by_id_for_update(
                invitation.household_id
            )
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            membership = await self.uow.memberships.get_by_household_and_user(
                household.id, user_id
            )
            if membership is not None and membership.is_active:
                return Return.err(
                    Error(errors.ALREADY_MEMBER, "You are already a member of this household")
                )

            limit = check_member_limit(household)
            if not limit.can_add_members:
                return Return.err(Error(errors.MEMBER_LIMIT_REACHED, limit.reason))

            role = MembershipRole(invitation.role)

            if membership is not None:
                # Returning member starts over with the invited role
                membership.role = role
                membership.permissions = None
                membership.is_active = True
                membership.email = email
                membership.invited_by = invitation.invited_by
                membership.joined_at = now
                membership.updated_at = now
                membership = await self.uow.memberships.update(membership)
            else:
                membership = await self.uow.memberships.create(
                    Membership(
                        household_id=household.id,
                        user_id=user_id,
                        email=email,
                        role=role,
                        is_active=True,
                        invited_by=invitation.invited_by,
                        joined_at=now,
                        created_at=now,
                        updated_at=now,
                    )
                )

            invitation.status = InvitationStatus.accepted
            invitation.accepted_at = now
            invitation.accepted_by = user_id
            invitation.updated_at = now
            await self.uow.invitations.update(invitation)

            household.member_count += 1
            household.updated_at = now
            await self.uow.households.update(household)

            audit = AuditEvent(
                household_id=household.id,
                user_id=user_id,
                action="invite_accepted",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "role": role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"User {user_id} joined household {household.id} as {role.value}")

            return Return.ok(
                AcceptInvitationResponse(
                    status="accepted",
                    household=HouseholdInfo(
                        id=str(household.id), name=household.name, role=role.value
                    ),
                    membership=MemberInfo.from_membership(membership),
                )
            )
