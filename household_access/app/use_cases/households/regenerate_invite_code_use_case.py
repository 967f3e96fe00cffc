"""
Regenerate Invite Code Use Case

Replaces a household's shareable invite code; the old code stops working.
"""

import logging
from uuid import UUID

from household_access.app.services.authorization import require_permission
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, Permission
from household_access.domain.policies import (
    DEFAULT_INVITE_CODE_TTL_DAYS,
    generate_invite_code,
    invite_code_expiry,
)
from household_access.libs.result import Error, Result, Return

from .dtos import InviteCodeResponse

logger = logging.getLogger(__name__)


class RegenerateInviteCodeUseCase:
    """
    Use case for issuing a new household invite code.

    Business Rules:
    - Requires effective can_invite_members
    - The new code is valid for invite_code_ttl_days (30 by default)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock = utcnow,
        ttl_days: int = DEFAULT_INVITE_CODE_TTL_DAYS,
    ):
        self.uow = uow
        self.clock = clock
        self.ttl_days = ttl_days

    async def execute(
        self, user_id: str, household_id: UUID
    ) -> Result[InviteCodeResponse]:
        async with self.uow:
            permission_result = await require_permission(
                self.uow,
                household_id,
                user_id,
                Permission.can_invite_members,
                "You do not have permission to manage the invite code",
            )
            if permission_result.is_err():
                return permission_result

            household = await self.uow.households.get_by_id_for_update(household_id)
            if household is None or not household.is_active:
                return Return.err(
                    Error(errors.HOUSEHOLD_NOT_FOUND, "Household not found")
                )

            now = self.clock()

            household.invite_code = generate_invite_code()
            household.invite_code_expires_at = invite_code_expiry(now, self.ttl_days)
            household.updated_at = now
            household = await self.uow.households.update(household)

            audit = AuditEvent(
                household_id=household_id,
                user_id=user_id,
                action="invite_code_regenerated",
                event_metadata={
                    "expires_at": household.invite_code_expires_at.isoformat(),
                },
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"Invite code of household {household_id} regenerated by {user_id}")

            return Return.ok(
                InviteCodeResponse(
                    invite_code=household.invite_code,
                    expires_at=household.invite_code_expires_at,
                )
            )
