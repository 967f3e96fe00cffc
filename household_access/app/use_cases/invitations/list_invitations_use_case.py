"""
List Invitations Use Cases
"""

from typing import List, Optional
from uuid import UUID

from household_access.app.services.authorization import require_active_membership
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.clock import Clock, utcnow
from household_access.domain.entities import Invitation, InvitationStatus
from household_access.domain.policies import effective_status
from household_access.libs.result import Error, Result, Return

from .dtos import InvitationDetailResponse, InvitationListResponse


def _parse_status(status: Optional[str]) -> Result[Optional[InvitationStatus]]:
    if status is None:
        return Return.ok(None)
    try:
        return Return.ok(InvitationStatus(status))
    except ValueError:
        return Return.err(
            Error(
                errors.INVALID_STATUS,
                f"Invalid status: {status}. Must be one of: "
                + ", ".join(s.value for s in InvitationStatus),
            )
        )


def _filter_by_status(
    invitations: List[Invitation], status: Optional[InvitationStatus], now
) -> List[Invitation]:
    if status is None:
        return invitations
    return [inv for inv in invitations if effective_status(inv, now) == status]


class ListHouseholdInvitationsUseCase:
    """
    Use case for listing a household's invitations.

    Business Rules:
    - Caller must be an active member
    - Optional filter on the effective status
    """

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, user_id: str, household_id: UUID, status: Optional[str] = None
    ) -> Result[InvitationListResponse]:
        status_result = _parse_status(status)
        if status_result.is_err():
            return status_result

        async with self.uow:
            membership_result = await require_active_membership(
                self.uow, household_id, user_id
            )
            if membership_result.is_err():
                return membership_result

            household = await self.uow.households.get_by_id(household_id)
            invitations = await self.uow.invitations.get_by_household_id(household_id)

            now = self.clock()
            return Return.ok(
                InvitationListResponse(
                    invitations=[
                        InvitationDetailResponse.from_invitation(
                            inv,
                            now,
                            household_name=household.name if household else None,
                        )
                        for inv in _filter_by_status(invitations, status_result.value, now)
                    ]
                )
            )


class ListMyInvitationsUseCase:
    """Invitations addressed to the caller's email, optionally filtered by effective status."""

    def __init__(self, uow: UnitOfWork, clock: Clock = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(
        self, email: Optional[str], status: Optional[str] = None
    ) -> Result[InvitationListResponse]:
        status_result = _parse_status(status)
        if status_result.is_err():
            return status_result

        if not email:
            return Return.ok(InvitationListResponse(invitations=[]))

        async with self.uow:
            invitations = await self.uow.invitations.get_by_email(email)

            now = self.clock()
            household_names = {}
            items = []
            for inv in _filter_by_status(invitations, status_result.value, now):
                if inv.household_id not in household_names:
                    household = await self.uow.households.get_by_id(inv.household_id)
                    household_names[inv.household_id] = household.name if household else None
                items.append(
                    InvitationDetailResponse.from_invitation(
                        inv, now, household_name=household_names[inv.household_id]
                    )
                )

            return Return.ok(InvitationListResponse(invitations=items))
