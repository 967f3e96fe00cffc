"""
Create Household Use Case

Creates a household and the creator's owner membership.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import (
    AuditEvent,
    Household,
    HouseholdSettings,
    Membership,
    MembershipRole,
)
from household_access.domain.policies import (
    DEFAULT_INVITE_CODE_TTL_DAYS,
    generate_invite_code,
    invite_code_expiry,
)
from household_access.libs.result import Error, Result, Return

from .dtos import HouseholdResponse

logger = logging.getLogger(__name__)


class CreateHouseholdUseCase:
    """
    Use case for creating a household.

    Business Rules:
    - Creator becomes an active owner membership
    - member_count starts at 1
    - A shareable invite code is issued straight away
    - Settings default to HouseholdSettings (max_members=10 unless
      overridden by the caller or configuration)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock = utcnow,
        default_settings: Optional[Dict[str, Any]] = None,
        invite_code_ttl_days: int = DEFAULT_INVITE_CODE_TTL_DAYS,
    ):
        self.uow = uow
        self.clock = clock
        self.default_settings = default_settings or {}
        self.invite_code_ttl_days = invite_code_ttl_days

    async def execute(
        self,
        user_id: str,
        email: Optional[str],
        name: str,
        description: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> Result[HouseholdResponse]:
        """
        Execute create household use case.

        Args:
            user_id: External id of the creating user
            email: Creator's email from the identity provider
            name: Household name
            description: Optional description
            settings: Optional settings overriding the defaults

        Returns:
            Result with HouseholdResponse DTO, or Error
        """
        name = (name or "").strip()
        if not name:
            return Return.err(Error(errors.INVALID_NAME, "Household name is required"))

        try:
            household_settings = HouseholdSettings(
                **{**self.default_settings, **(settings or {})}
            )
        except ValidationError as exc:
            return Return.err(
                Error(errors.INVALID_SETTINGS, "Invalid household settings", reason=str(exc))
            )

        if household_settings.max_members < 1:
            return Return.err(
                Error(errors.INVALID_SETTINGS, "max_members must be at least 1")
            )

        async with self.uow:
            now = self.clock()

            household = Household(
                name=name,
                description=(description or "").strip() or None,
                owner_id=user_id,
                member_count=1,
                settings=household_settings.model_dump(),
                invite_code=generate_invite_code(),
                invite_code_expires_at=invite_code_expiry(now, self.invite_code_ttl_days),
                created_at=now,
                updated_at=now,
            )
            household = await self.uow.households.create(household)

            membership = Membership(
                household_id=household.id,
                user_id=user_id,
                email=email,
                role=MembershipRole.owner,
                is_active=True,
                joined_at=now,
                created_at=now,
                updated_at=now,
            )
            await self.uow.memberships.create(membership)

            audit = AuditEvent(
                household_id=household.id,
                user_id=user_id,
                action="household_created",
                event_metadata={"name": name},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Household {household.id} created by {user_id}")

            return Return.ok(HouseholdResponse.from_household(household))
