"""
Change Member Role Use Case

Handles changing a member's role within a household.
"""

import logging
from uuid import UUID

from household_access.app.services.authorization import decision_error
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, MemberAction, MembershipRole
from household_access.domain.policies import can_manage_member
from household_access.libs.result import Error, Result, Return

from .dtos import MemberInfo, UpdateMemberResponse

logger = logging.getLogger(__name__)


class ChangeRoleUseCase:
    """
    Use case for changing a member's role within a household.

    Business Rules:
    - Only owners can change roles
    - Nobody can change their own role
    - Target must be an active member
    - Permission overrides are kept across role changes
    - Creates audit event
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        actor_user_id: str,
        household_id: UUID,
        target_user_id: str,
        new_role: str,
    ) -> Result[UpdateMemberResponse]:
        """
        Execute change role use case.

        Args:
            actor_user_id: User making the change
            household_id: Household ID
            target_user_id: User whose role is being changed
            new_role: New role to assign (owner/admin/member)

        Returns:
            Result with UpdateMemberResponse DTO, or Error
        """
        try:
            membership_role = MembershipRole(new_role)
        except ValueError:
            return Return.err(
                Error(
                    errors.INVALID_ROLE,
                    f"Invalid role: {new_role}. Must be one of: owner, admin, member",
                )
            )

        async with self.uow:
            household = await self.uow.households.get_by_id_for_update(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            actor = await self.uow.memberships.get_by_household_and_user(
                household_id, actor_user_id
            )
            target = await self.uow.memberships.get_by_household_and_user(
                household_id, target_user_id
            )
            if target is not None and not target.is_active:
                target = None

            owner_count = await self.uow.memberships.count_active_owners(household_id)

            decision = can_manage_member(
                actor, target, MemberAction.update_role, owner_count
            )
            if not decision.can_manage:
                logger.warning(
                    f"Denied role change of {target_user_id} in {household_id} "
                    f"by {actor_user_id}: {decision.reason}"
                )
                return Return.err(decision_error(decision))

            old_role = MembershipRole(target.role).value

            target.role = membership_role
            target.updated_at = self.clock()
            await self.uow.memberships.update(target)

            audit = AuditEvent(
                household_id=household_id,
                user_id=actor_user_id,
                action="role_changed",
                event_metadata={
                    "target_user_id": target_user_id,
                    "old_role": old_role,
                    "new_role": membership_role.value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                f"Role of {target_user_id} in household {household_id} changed "
                f"from {old_role} to {membership_role.value}"
            )

            return Return.ok(
                UpdateMemberResponse(
                    status="updated", membership=MemberInfo.from_membership(target)
                )
            )
