"""
Transfer Ownership Use Case

Hands a household over to another active member in a single step.
"""

import logging
from uuid import UUID

from household_access.app.services.authorization import require_active_membership
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, MembershipRole
from household_access.libs.result import Error, Result, Return

from .dtos import MemberInfo, TransferOwnershipResponse

logger = logging.getLogger(__name__)


class TransferOwnershipUseCase:
    """
    Use case for transferring household ownership.

    Business Rules:
    - Only an owner can transfer
    - The new owner must be another active member
    - New owner gets role owner, the previous owner becomes admin
    - Both memberships drop their permission overrides
    - household.owner_id follows the new owner
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, actor_user_id: str, household_id: UUID, new_owner_user_id: str
    ) -> Result[TransferOwnershipResponse]:
        """
        Execute transfer ownership use case.

        Args:
            actor_user_id: Current owner handing the household over
            household_id: Household ID
            new_owner_user_id: Member receiving ownership

        Returns:
            Result with TransferOwnershipResponse DTO, or Error
        """
        if new_owner_user_id == actor_user_id:
            return Return.err(
                Error(errors.INVALID_TRANSFER_TARGET, "Cannot transfer ownership to yourself")
            )

        async with self.uow:
            household = await self.uow.households.get_by_id_for_update(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            actor_result = await require_active_membership(
                self.uow, household_id, actor_user_id
            )
            if actor_result.is_err():
                return actor_result

            actor = actor_result.value
            if actor.role != MembershipRole.owner:
                logger.warning(
                    f"Denied ownership transfer in {household_id} by non-owner {actor_user_id}"
                )
                return Return.err(
                    Error(
                        errors.PERMISSION_DENIED,
                        "Only a household owner can transfer ownership",
                    )
                )

            target = await self.uow.memberships.get_by_household_and_user(
                household_id, new_owner_user_id
            )
            if target is None or not target.is_active:
                return Return.err(
                    Error(
                        errors.MEMBERSHIP_NOT_FOUND,
                        "New owner must be an active member of the household",
                    )
                )

            now = self.clock()
            previous_target_role = MembershipRole(target.role).value

            target.role = MembershipRole.owner
            target.permissions = None
            target.updated_at = now
            target = await self.uow.memberships.update(target)

            actor.role = MembershipRole.admin
            actor.permissions = None
            actor.updated_at = now
            actor = await self.uow.memberships.update(actor)

            old_owner_id = household.owner_id
            household.owner_id = new_owner_user_id
            household.updated_at = now
            await self.uow.households.update(household)

            audit = AuditEvent(
                household_id=household_id,
                user_id=actor_user_id,
                action="ownership_transferred",
                event_metadata={
                    "old_owner_id": old_owner_id,
                    "new_owner_id": new_owner_user_id,
                    "new_owner_previous_role": previous_target_role,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                f"Ownership of household {household_id} transferred "
                f"from {actor_user_id} to {new_owner_user_id}"
            )

            return Return.ok(
                TransferOwnershipResponse(
                    status="transferred",
                    previous_owner=MemberInfo.from_membership(actor),
                    new_owner=MemberInfo.from_membership(target),
                )
            )
