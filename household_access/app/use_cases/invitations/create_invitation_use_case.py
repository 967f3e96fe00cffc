"""
Create Invitation Use Case

Handles inviting people to join a household with a given role.
"""

import logging
from typing import Optional
from uuid import UUID

from household_access.app.services.authorization import require_permission
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import (
    INVITABLE_ROLES,
    AuditEvent,
    Invitation,
    InvitationStatus,
    MembershipRole,
    Permission,
)
from household_access.domain.policies import (
    DEFAULT_INVITATION_TTL_HOURS,
    check_member_limit,
    compute_expiry,
    generate_invite_token,
    is_lazily_expired,
)
from household_access.libs.result import Error, Result, Return

from .dtos import CreatedInvitationResponse

logger = logging.getLogger(__name__)


class CreateInvitationUseCase:
    """
    Use case for inviting someone to a household.

    Business Rules:
    - Inviter needs effective can_invite_members
    - Role must be admin or member
    - Household must exist and be active
    - An active member with the same email cannot be invited
    - The household must have a free slot
    - Only one effectively pending invitation per (household, email); a
      stored pending invitation that has lapsed is marked expired instead
    - Generates a cryptographically secure token
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
        self,
        inviter_user_id: str,
        household_id: UUID,
        email: str,
        role: str = MembershipRole.member.value,
        message: Optional[str] = None,
        ttl_hours: Optional[int] = None,
    ) -> Result[CreatedInvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            inviter_user_id: User sending the invite
            household_id: Target household
            email: Email address to invite
            role: Role to assign (admin/member)
            message: Optional note shown to the invitee
            ttl_hours: Overrides the configured lifetime

        Returns:
            Result with CreatedInvitationResponse DTO, or Error
        """
        try:
            membership_role = MembershipRole(role)
        except ValueError:
            membership_role = None

        if membership_role not in INVITABLE_ROLES:
            return Return.err(
                Error(errors.INVALID_ROLE, f"Invalid role: {role}. Must be one of: admin, member")
            )

        ttl_hours = ttl_hours if ttl_hours is not None else self.ttl_hours
        if ttl_hours <= 0:
            return Return.err(
                Error(errors.INVALID_TTL, "Invitation lifetime must be a positive number of hours")
            )

        async with self.uow:
            permission_result = await require_permission(
                self.uow,
                household_id,
                inviter_user_id,
                Permission.can_invite_members,
                "You do not have permission to invite members",
            )
            if permission_result.is_err():
                return permission_result

            household = await self.uow.households.get_by_id_for_update(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            existing_member = await self.uow.memberships.get_active_by_household_and_email(
                household_id, email
            )
            if existing_member is not None:
                return Return.err(
                    Error(errors.ALREADY_MEMBER, "User is already a member of this household")
                )

            limit = check_member_limit(household)
            if not limit.can_add_members:
                return Return.err(
                    Error(errors.MEMBER_LIMIT_REACHED, limit.reason)
                )

            now = self.clock()

            stored_pending = await self.uow.invitations.get_pending_by_household_and_email(
                household_id, email
            )
            if any(not is_lazily_expired(inv, now) for inv in stored_pending):
                return Return.err(
                    Error(
                        errors.INVITE_ALREADY_EXISTS,
                        "A pending invitation already exists for this email",
                    )
                )

            # Lapsed invitations are settled before the new one is issued
            for lapsed in stored_pending:
                lapsed.status = InvitationStatus.expired
                lapsed.updated_at = now
                await self.uow.invitations.update(lapsed)

            invitation = Invitation(
                household_id=household_id,
                email=email,
                role=membership_role,
                invited_by=inviter_user_id,
                invite_token=generate_invite_token(),
                message=message,
                expires_at=compute_expiry(now, ttl_hours),
                created_at=now,
                updated_at=now,
            )
            invitation = await self.uow.invitations.create(invitation)

            audit = AuditEvent(
                household_id=household_id,
                user_id=inviter_user_id,
                action="invite_sent",
                event_metadata={
                    "invitation_id": str(invitation.id),
                    "invited_email": email,
                    "role": membership_role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Invitation {invitation.id} to household {household_id} sent by {inviter_user_id}")

            return Return.ok(
                CreatedInvitationResponse.from_invitation(
                    invitation, now, invite_token=invitation.invite_token
                )
            )
