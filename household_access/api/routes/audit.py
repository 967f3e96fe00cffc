"""
Audit API Routes

Handles audit event retrieval endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from household_access.api.error import parse_uuid, raise_for_error
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.app.use_cases.audit import AuditEventsResponse, GetAuditEventsUseCase
from household_access.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/households", tags=["Audit"])


@router.get(
    "/{household_id}/audit-events",
    status_code=status.HTTP_200_OK,
    response_model=AuditEventsResponse,
)
async def get_audit_events(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
):
    """
    Get Household Audit Events

    Only accessible to members with can_manage_members.

    Query Parameters:
        - limit: Maximum number of events to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = GetAuditEventsUseCase(uow)
    result = await use_case.execute(
        user_id=current_user["user_id"],
        household_id=household_uuid,
        limit=limit,
        cursor=cursor,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
