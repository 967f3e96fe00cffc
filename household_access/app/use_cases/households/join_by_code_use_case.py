"""
Join Household By Code Use Case

Lets a signed-in user join a household with its shareable invite code.
"""

import logging
from typing import Optional

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.app.use_cases.members.dtos import MemberInfo
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import AuditEvent, Membership, MembershipRole
from household_access.domain.policies import (
    check_member_limit,
    is_invite_code_expired,
    normalize_invite_code,
)
from household_access.libs.result import Error, Result, Return

from .dtos import HouseholdInfo, JoinHouseholdResponse

logger = logging.getLogger(__name__)


class JoinByCodeUseCase:
    """
    Use case for joining a household with an invite code.

    Business Logic:
    1. Find the active household holding the code
    2. Reject an expired code
    3. Lock the household row, reject if already an active member
    4. Re-check the member limit on the locked row
    5. Reactivate the previous membership or create a new one, always as
       a plain member without overrides
    6. Bump member_count
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, user_id: str, email: Optional[str], invite_code: str
    ) -> Result[JoinHouseholdResponse]:
        code = normalize_invite_code(invite_code)
        if not code:
            return Return.err(
                Error(errors.INVALID_INVITE_CODE, "Invalid or expired invite code")
            )

        async with self.uow:
            found = await self.uow.households.get_active_by_invite_code(code)
            if found is None:
                return Return.err(
                    Error(errors.INVALID_INVITE_CODE, "Invalid or expired invite code")
                )

            household = await self.uow.households.get_by_id_for_update(found.id)
            if household is None or not household.is_active or household.invite_code != code:
                return Return.err(
                    Error(errors.INVALID_INVITE_CODE, "Invalid or expired invite code")
                )

            now = self.clock()

            if is_invite_code_expired(household, now):
                return Return.err(
                    Error(errors.INVITE_CODE_EXPIRED, "Invite code has expired")
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

            if membership is not None:
                membership.role = MembershipRole.member
                membership.permissions = None
                membership.is_active = True
                membership.email = email
                membership.invited_by = None
                membership.joined_at = now
                membership.updated_at = now
                membership = await self.uow.memberships.update(membership)
            else:
                membership = await self.uow.memberships.create(
                    Membership(
                        household_id=household.id,
                        user_id=user_id,
                        email=email,
                        role=MembershipRole.member,
                        is_active=True,
                        joined_at=now,
                        created_at=now,
                        updated_at=now,
                    )
                )

            household.member_count += 1
            household.updated_at = now
            await self.uow.households.update(household)

            audit = AuditEvent(
                household_id=household.id,
                user_id=user_id,
                action="member_joined",
                event_metadata={"via": "invite_code"},
            )
            await self.uow.audit_events.create(audit)

            await self.uow.commit()

            logger.info(f"User {user_id} joined household {household.id} with invite code")

            return Return.ok(
                JoinHouseholdResponse(
                    status="joined",
                    household=HouseholdInfo(
                        id=str(household.id),
                        name=household.name,
                        role=MembershipRole.member.value,
                    ),
                    membership=MemberInfo.from_membership(membership),
                )
            )
