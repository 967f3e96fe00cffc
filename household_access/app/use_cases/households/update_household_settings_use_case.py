"""
Update Household Settings Use Case
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import ValidationError

from household_access.app.services.authorization import require_permission
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, HouseholdSettings, Permission
from household_access.libs.result import Error, Result, Return

from .dtos import HouseholdResponse

logger = logging.getLogger(__name__)


class UpdateHouseholdSettingsUseCase:
    """
    Use case for renaming a household and changing its settings.

    Business Rules:
    - Requires effective can_edit_household_settings
    - Settings are merged over the stored ones
    - max_members cannot drop below the current member_count
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self,
        user_id: str,
        household_id: UUID,
        name: Optional[str] = None,
        description: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> Result[HouseholdResponse]:
        async with self.uow:
            permission_result = await require_permission(
                self.uow,
                household_id,
                user_id,
                Permission.can_edit_household_settings,
                "You do not have permission to edit household settings",
            )
            if permission_result.is_err():
                return permission_result

            household = await self.uow.households.get_by_id_for_update(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            old_settings = dict(household.settings or {})

            if name is not None:
                name = name.strip()
                if not name:
                    return Return.err(
                        Error(errors.INVALID_NAME, "Household name is required")
                    )
                household.name = name

            if description is not None:
                household.description = description.strip() or None

            if settings:
                try:
                    merged = HouseholdSettings(**{**old_settings, **settings})
                except ValidationError as exc:
                    return Return.err(
                        Error(
                            errors.INVALID_SETTINGS,
                            "Invalid household settings",
                            reason=str(exc),
                        )
                    )

                if merged.max_members < max(1, household.member_count):
                    return Return.err(
                        Error(
                            errors.INVALID_SETTINGS,
                            "max_members cannot be lower than the current member count",
                            reason=f"Household has {household.member_count} active members",
                        )
                    )

                household.settings = merged.model_dump()

            household.updated_at = self.clock()
            await self.uow.households.update(household)

            audit = AuditEvent(
                household_id=household_id,
                user_id=user_id,
                action="household_updated",
                event_metadata={
                    "old_settings": old_settings,
                    "new_settings": household.settings,
                    "name": household.name,
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Household {household_id} updated by {user_id}")

            return Return.ok(HouseholdResponse.from_household(household))
