"""
Delete Household Use Case

Soft-deletes a household and deactivates every membership.
"""

import logging
from uuid import UUID

from household_access.app.services.authorization import require_permission
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, Permission
from household_access.libs.result import Error, Result, Return

from .dtos import DeleteHouseholdResponse

logger = logging.getLogger(__name__)


class DeleteHouseholdUseCase:
    """
    Use case for deleting a household.

    Business Logic:
    1. Require effective can_delete_household
    2. Mark household inactive and stamp deleted_at
    3. Deactivate all active memberships, member_count becomes 0
    4. Create audit event
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, user_id: str, household_id: UUID
    ) -> Result[DeleteHouseholdResponse]:
        async with self.uow:
            permission_result = await require_permission(
                self.uow,
                household_id,
                user_id,
                Permission.can_delete_household,
                "You do not have permission to delete this household",
            )
            if permission_result.is_err():
                return permission_result

            household = await self.uow.households.get_by_id_for_update(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            now = self.clock()

            memberships = await self.uow.memberships.get_by_household_id(
                household_id, active_only=True
            )
            for membership in memberships:
                membership.is_active = False
                membership.updated_at = now
                await self.uow.memberships.update(membership)

            household.is_active = False
            household.deleted_at = now
            household.member_count = 0
            household.updated_at = now
            await self.uow.households.update(household)

            audit = AuditEvent(
                household_id=household_id,
                user_id=user_id,
                action="household_deleted",
                event_metadata={
                    "name": household.name,
                    "memberships_deactivated": len(memberships),
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Household {household_id} deleted by {user_id}")

            return Return.ok(
                DeleteHouseholdResponse(
                    status="deleted", memberships_deactivated=len(memberships)
                )
            )
