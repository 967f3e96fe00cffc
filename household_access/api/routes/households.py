"""
Household API Routes

Handles household lifecycle and settings endpoints.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from household_access.api.error import parse_uuid, raise_for_error
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.app.use_cases.households import (
    CreateHouseholdUseCase,
    DeleteHouseholdResponse,
    DeleteHouseholdUseCase,
    GetHouseholdUseCase,
    HouseholdDetailResponse,
    HouseholdListResponse,
    HouseholdResponse,
    InviteCodeResponse,
    JoinByCodeUseCase,
    JoinHouseholdResponse,
    ListMyHouseholdsUseCase,
    RegenerateInviteCodeUseCase,
    UpdateHouseholdSettingsUseCase,
)
from household_access.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/households", tags=["Households"])


class CreateHouseholdRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    settings: Optional[Dict[str, Any]] = None


class UpdateHouseholdRequest(BaseModel):
    """Only the fields that are sent are changed"""

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    settings: Optional[Dict[str, Any]] = None


class JoinHouseholdRequest(BaseModel):
    invite_code: str = Field(..., min_length=1, max_length=32)


def default_household_settings() -> Dict[str, Any]:
    return {
        "max_members": ApplicationConfig.DEFAULT_MAX_MEMBERS,
        "low_stock_threshold": ApplicationConfig.DEFAULT_LOW_STOCK_THRESHOLD,
    }


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=HouseholdResponse,
)
async def create_household(
    request: CreateHouseholdRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Household

    The caller becomes the household's first owner.

    Raises:
        - 400 Bad Request: INVALID_NAME, INVALID_SETTINGS
        - 401 Unauthorized: Invalid or expired JWT
    """
    use_case = CreateHouseholdUseCase(
        uow,
        default_settings=default_household_settings(),
        invite_code_ttl_days=ApplicationConfig.INVITE_CODE_TTL_DAYS,
    )
    result = await use_case.execute(
        user_id=current_user["user_id"],
        email=current_user.get("email"),
        name=request.name,
        description=request.description,
        settings=request.settings,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=HouseholdListResponse,
)
async def list_my_households(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMyHouseholdsUseCase(uow).execute(current_user["user_id"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{household_id}",
    status_code=status.HTTP_200_OK,
    response_model=HouseholdDetailResponse,
)
async def get_household(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Household

    Raises:
        - 403 Forbidden: NOT_A_MEMBER
        - 404 Not Found: HOUSEHOLD_NOT_FOUND
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    result = await GetHouseholdUseCase(uow).execute(current_user["user_id"], household_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{household_id}",
    status_code=status.HTTP_200_OK,
    response_model=HouseholdResponse,
)
async def update_household(
    household_id: str,
    request: UpdateHouseholdRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Household Settings

    Requires can_edit_household_settings. max_members cannot be set below
    the current member count.

    Raises:
        - 400 Bad Request: INVALID_NAME, INVALID_SETTINGS
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
        - 404 Not Found: HOUSEHOLD_NOT_FOUND
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = UpdateHouseholdSettingsUseCase(uow)
    result = await use_case.execute(
        user_id=current_user["user_id"],
        household_id=household_uuid,
        name=request.name,
        description=request.description,
        settings=request.settings,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{household_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteHouseholdResponse,
)
async def delete_household(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Household

    Soft delete; every membership is deactivated. Requires can_delete_household.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
        - 404 Not Found: HOUSEHOLD_NOT_FOUND
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    result = await DeleteHouseholdUseCase(uow).execute(current_user["user_id"], household_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/join",
    status_code=status.HTTP_200_OK,
    response_model=JoinHouseholdResponse,
)
async def join_household(
    request: JoinHouseholdRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Join Household By Invite Code

    The caller joins as a plain member.

    Raises:
        - 404 Not Found: INVALID_INVITE_CODE
        - 409 Conflict: INVITE_CODE_EXPIRED, ALREADY_MEMBER, MEMBER_LIMIT_REACHED
    """
    result = await JoinByCodeUseCase(uow).execute(
        user_id=current_user["user_id"],
        email=current_user.get("email"),
        invite_code=request.invite_code,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{household_id}/invite-code",
    status_code=status.HTTP_200_OK,
    response_model=InviteCodeResponse,
)
async def regenerate_invite_code(
    household_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Regenerate Invite Code

    Requires can_invite_members. The previous code stops working.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
        - 404 Not Found: HOUSEHOLD_NOT_FOUND
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = RegenerateInviteCodeUseCase(
        uow, ttl_days=ApplicationConfig.INVITE_CODE_TTL_DAYS
    )
    result = await use_case.execute(current_user["user_id"], household_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
