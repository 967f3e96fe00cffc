"""
Permission API Routes

Read-only permission and capacity queries.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from household_access.api.error import parse_uuid, raise_for_error
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.app.use_cases.permissions import (
    CheckMemberLimitUseCase,
    CheckPermissionsUseCase,
    CheckPermissionUseCase,
    GetEffectivePermissionsUseCase,
    GetRolePermissionsUseCase,
    RolePermissionsResponse,
)
from household_access.depends import get_current_user, get_unit_of_work
from household_access.domain.policies import (
    EffectivePermissions,
    MemberLimit,
    MultiPermissionCheck,
    PermissionCheck,
)

router = APIRouter(prefix="/households", tags=["Permissions"])

roles_router = APIRouter(prefix="/roles", tags=["Permissions"])


class CheckPermissionsRequest(BaseModel):
    permissions: List[str] = Field(..., min_length=1)


@router.get(
    "/{household_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=EffectivePermissions,
)
async def get_my_permissions(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Effective Permissions

    Role defaults overlaid with the caller's overrides.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = GetEffectivePermissionsUseCase(uow)
    result = await use_case.execute(current_user["user_id"], household_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{household_id}/permissions/check",
    status_code=status.HTTP_200_OK,
    response_model=PermissionCheck,
)
async def check_permission(
    household_id: str,
    permission: str = Query(..., description="Permission name"),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = CheckPermissionUseCase(uow)
    result = await use_case.execute(current_user["user_id"], household_uuid, permission)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{household_id}/permissions/check",
    status_code=status.HTTP_200_OK,
    response_model=MultiPermissionCheck,
)
async def check_permissions(
    household_id: str,
    request: CheckPermissionsRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = CheckPermissionsUseCase(uow)
    result = await use_case.execute(
        current_user["user_id"], household_uuid, request.permissions
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{household_id}/member-limit",
    status_code=status.HTTP_200_OK,
    response_model=MemberLimit,
)
async def check_member_limit(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = CheckMemberLimitUseCase(uow)
    result = await use_case.execute(household_uuid, user_id=current_user["user_id"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@roles_router.get(
    "/permissions",
    status_code=status.HTTP_200_OK,
    response_model=RolePermissionsResponse,
)
async def get_role_permissions():
    """Role default permission table"""
    result = await GetRolePermissionsUseCase().execute()
    return result.value
