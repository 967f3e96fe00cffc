"""
Get Audit Events Use Case

Retrieves household audit events with pagination.
"""

from typing import Optional
from uuid import UUID

from household_access.app.services.authorization import require_permission
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain.entities import Permission
from household_access.libs.result import Result, Return

from .dtos import AuditEventInfo, AuditEventsResponse


class GetAuditEventsUseCase:
    """
    Use case for retrieving audit events for a household.

    Business Rules:
    - Caller must have effective can_manage_members
    - Results are household-scoped
    - Results ordered by newest first
    - Supports cursor-based pagination
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: str,
        household_id: UUID,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[AuditEventsResponse]:
        """
        Execute get audit events use case.

        Args:
            user_id: User id from JWT
            household_id: Household UUID
            limit: Maximum number of events to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with events list and next_cursor, or Error
        """
        async with self.uow:
            permission_result = await require_permission(
                self.uow,
                household_id,
                user_id,
                Permission.can_manage_members,
                "You do not have permission to view audit events",
            )
            if permission_result.is_err():
                return permission_result

            events, next_cursor = await self.uow.audit_events.get_by_household_paginated(
                household_id, limit=limit, cursor=cursor
            )

            return Return.ok(
                AuditEventsResponse(
                    events=[
                        AuditEventInfo(
                            action=event.action,
                            user_id=event.user_id,
                            timestamp=event.created_at,
                            metadata=event.event_metadata or {},
                        )
                        for event in events
                    ],
                    next_cursor=next_cursor,
                )
            )
