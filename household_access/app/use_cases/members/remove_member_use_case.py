"""
Remove Member Use Case

Handles removing (soft delete) members from a household.
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

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing members from a household.

    Business Rules:
    - Household row is locked before the owner count is taken
    - Owners can remove anyone; can_manage_members holders can remove plain members
    - Anyone can remove themselves, except the last active owner
    - Removal deactivates the membership and decrements member_count
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        actor_user_id: str,
        household_id: UUID,
        target_user_id: str,
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            actor_user_id: User removing the member
            household_id: Household ID
            target_user_id: User being removed

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
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
            # Former members are treated as unknown
            if target is not None and not target.is_active:
                target = None

            owner_count = await self.uow.memberships.count_active_owners(household_id)

            decision = can_manage_member(actor, target, MemberAction.remove, owner_count)
            if not decision.can_manage:
                logger.warning(
                    f"Denied removal of {target_user_id} from {household_id} "
                    f"by {actor_user_id}: {decision.reason}"
                )
                return Return.err(decision_error(decision))

            now = self.clock()
            is_self_removal = actor_user_id == target_user_id

            target.is_active = False
            target.updated_at = now
            await self.uow.memberships.update(target)

            household.member_count = max(0, household.member_count - 1)
            household.updated_at = now
            await self.uow.households.update(household)

            audit = AuditEvent(
                household_id=household_id,
                user_id=actor_user_id,
                action="member_left" if is_self_removal else "member_removed",
                event_metadata={
                    "removed_user_id": target_user_id,
                    "removed_user_role": MembershipRole(target.role).value,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                f"Member {target_user_id} removed from household {household_id} "
                f"by {actor_user_id}"
            )

            return Return.ok(
                RemoveMemberResponse(
                    status="left" if is_self_removal else "removed",
                    member_count=household.member_count,
                )
            )
