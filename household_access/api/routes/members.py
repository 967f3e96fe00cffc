"""
Member API Routes

Handles member listing and member management endpoints.
"""

from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from household_access.api.error import parse_uuid, raise_for_error
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.app.use_cases.members import (
    CanManageMemberUseCase,
    ChangeRoleUseCase,
    LeaveHouseholdUseCase,
    ListMembersUseCase,
    MemberListResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    TouchLastActiveResponse,
    TouchLastActiveUseCase,
    TransferOwnershipResponse,
    TransferOwnershipUseCase,
    UpdateMemberPermissionsUseCase,
    UpdateMemberResponse,
)
from household_access.depends import get_current_user, get_unit_of_work
from household_access.domain.policies import ManageDecision

router = APIRouter(prefix="/households", tags=["Members"])


class ChangeRoleRequest(BaseModel):
    role: str = Field(..., description="New role (owner/admin/member)")


class TransferOwnershipRequest(BaseModel):
    new_owner_id: str = Field(..., min_length=1, description="User receiving ownership")


class UpdatePermissionsRequest(BaseModel):
    """Replaces the member's overrides; null values drop a key"""

    permissions: Dict[str, Optional[bool]] = Field(default_factory=dict)


@router.get(
    "/{household_id}/members",
    status_code=status.HTTP_200_OK,
    response_model=MemberListResponse,
)
async def list_members(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    result = await ListMembersUseCase(uow).execute(current_user["user_id"], household_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{household_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    household_id: str,
    user_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Owners can remove anyone; members with can_manage_members can remove
    plain members. The last owner cannot be removed.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
        - 404 Not Found: HOUSEHOLD_NOT_FOUND, MEMBERSHIP_NOT_FOUND
        - 409 Conflict: LAST_OWNER_PROTECTED
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = RemoveMemberUseCase(uow)
    result = await use_case.execute(
        actor_user_id=current_user["user_id"],
        household_id=household_uuid,
        target_user_id=user_id,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{household_id}/leave",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def leave_household(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Leave Household

    Raises:
        - 403 Forbidden: NOT_A_MEMBER
        - 409 Conflict: LAST_OWNER_PROTECTED
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    result = await LeaveHouseholdUseCase(uow).execute(current_user["user_id"], household_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{household_id}/members/{user_id}/role",
    status_code=status.HTTP_200_OK,
    response_model=UpdateMemberResponse,
)
async def change_member_role(
    household_id: str,
    user_id: str,
    request: ChangeRoleRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change Member Role

    Owners only; nobody can change their own role.

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED, SELF_ESCALATION_DENIED
        - 404 Not Found: HOUSEHOLD_NOT_FOUND, MEMBERSHIP_NOT_FOUND
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = ChangeRoleUseCase(uow)
    result = await use_case.execute(
        actor_user_id=current_user["user_id"],
        household_id=household_uuid,
        target_user_id=user_id,
        new_role=request.role,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{household_id}/members/{user_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=UpdateMemberResponse,
)
async def update_member_permissions(
    household_id: str,
    user_id: str,
    request: UpdatePermissionsRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Member Permissions

    Raises:
        - 400 Bad Request: INVALID_PERMISSION
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED, SELF_ESCALATION_DENIED
        - 404 Not Found: HOUSEHOLD_NOT_FOUND, MEMBERSHIP_NOT_FOUND
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = UpdateMemberPermissionsUseCase(uow)
    result = await use_case.execute(
        actor_user_id=current_user["user_id"],
        household_id=household_uuid,
        target_user_id=user_id,
        permissions=request.permissions,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{household_id}/members/me/activity",
    status_code=status.HTTP_200_OK,
    response_model=TouchLastActiveResponse,
)
async def touch_last_active(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    result = await TouchLastActiveUseCase(uow).execute(current_user["user_id"], household_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{household_id}/members/{user_id}/can-manage",
    status_code=status.HTTP_200_OK,
    response_model=ManageDecision,
)
async def can_manage_member(
    household_id: str,
    user_id: str,
    action: str = Query(..., description="remove, update_role, update_permissions or view_details"),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Can Manage Member

    Answers whether the caller may perform the action on the member. A
    denial is a 200 response with can_manage=false.
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = CanManageMemberUseCase(uow)
    result = await use_case.execute(
        actor_user_id=current_user["user_id"],
        household_id=household_uuid,
        target_user_id=user_id,
        action=action,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{household_id}/transfer-ownership",
    status_code=status.HTTP_200_OK,
    response_model=TransferOwnershipResponse,
)
async def transfer_ownership(
    household_id: str,
    request: TransferOwnershipRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Transfer Ownership

    The new owner must be an active member; the caller becomes admin.

    Raises:
        - 400 Bad Request: INVALID_TRANSFER_TARGET
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
        - 404 Not Found: HOUSEHOLD_NOT_FOUND, MEMBERSHIP_NOT_FOUND
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    result = await TransferOwnershipUseCase(uow).execute(
        actor_user_id=current_user["user_id"],
        household_id=household_uuid,
        new_owner_user_id=request.new_owner_id,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
