"""
Update Member Permissions Use Case

Replaces the per-member permission overrides.
"""

import logging
from typing import Dict, Optional
from uuid import UUID

from household_access.app.services.authorization import decision_error
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, MemberAction, Permission
from household_access.domain.policies import can_manage_member
from household_access.libs.result import Error, Result, Return

from .dtos import MemberInfo, UpdateMemberResponse

logger = logging.getLogger(__name__)


class UpdateMemberPermissionsUseCase:
    """
    Use case for setting permission overrides on a member.

    Business Rules:
    - Owners can update anyone else; can_manage_members holders can update non-owners
    - Nobody can update their own permissions
    - The given map replaces the stored overrides; None values are dropped
      and an empty map clears the overrides
    - Unknown permission names fail with INVALID_PERMISSION
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        actor_user_id: str,
        household_id: UUID,
        target_user_id: str,
        permissions: Dict[str, Optional[bool]],
    ) -> Result[UpdateMemberResponse]:
        known = {p.value for p in Permission}
        unknown = sorted(key for key in (permissions or {}) if key not in known)
        if unknown:
            return Return.err(
                Error(
                    errors.INVALID_PERMISSION,
                    f"Unknown permission: {', '.join(unknown)}",
                )
            )

        overrides = {
            key: bool(value)
            for key, value in (permissions or {}).items()
            if value is not None
        }

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
                actor, target, MemberAction.update_permissions, owner_count
            )
            if not decision.can_manage:
                logger.warning(
                    f"Denied permission update of {target_user_id} in {household_id} "
                    f"by {actor_user_id}: {decision.reason}"
                )
                return Return.err(decision_error(decision))

            old_overrides = dict(target.permissions or {})

            target.permissions = overrides or None
            target.updated_at = self.clock()
            await self.uow.memberships.update(target)

            audit = AuditEvent(
                household_id=household_id,
                user_id=actor_user_id,
                action="permissions_updated",
                event_metadata={
                    "target_user_id": target_user_id,
                    "old_permissions": old_overrides,
                    "new_permissions": overrides,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(
                f"Permissions of {target_user_id} in household {household_id} "
                f"updated by {actor_user_id}"
            )

            return Return.ok(
                UpdateMemberResponse(
                    status="updated", membership=MemberInfo.from_membership(target)
                )
            )
