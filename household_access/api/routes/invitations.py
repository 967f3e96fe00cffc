"""
Invitation API Routes

Household-scoped invitation management plus token-addressed endpoints for
invitees.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field, field_validator

from config import ApplicationConfig
from household_access.api.error import parse_uuid, raise_for_error
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreatedInvitationResponse,
    CreateInvitationUseCase,
    DeclineInvitationUseCase,
    GetInvitationUseCase,
    InvitationDetailResponse,
    InvitationListResponse,
    InvitationStatusResponse,
    ListHouseholdInvitationsUseCase,
    ListMyInvitationsUseCase,
    ResendInvitationUseCase,
    RevokeInvitationUseCase,
)
from household_access.depends import get_current_user, get_unit_of_work

household_router = APIRouter(prefix="/households", tags=["Invitations"])

router = APIRouter(prefix="/invitations", tags=["Invitations"])


class CreateInvitationRequest(BaseModel):
    """
    Create invitation HTTP request payload

    Role is admin or member; owners are made by role change.
    """

    email: str = Field(..., description="Invitee email address")
    role: str = Field("member", description="Role to grant (admin/member)")
    message: Optional[str] = Field(None, max_length=1000)

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        """Reject malformed addresses but keep the one sent, unnormalized"""
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(str(exc))
        return v


@household_router.post(
    "/{household_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedInvitationResponse,
)
async def create_invitation(
    household_id: str,
    request: CreateInvitationRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Invitation

    Raises:
        - 400 Bad Request: INVALID_ROLE
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
        - 404 Not Found: HOUSEHOLD_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, MEMBER_LIMIT_REACHED, INVITE_ALREADY_EXISTS
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = CreateInvitationUseCase(uow, ttl_hours=ApplicationConfig.INVITATION_TTL_HOURS)
    result = await use_case.execute(
        inviter_user_id=current_user["user_id"],
        household_id=household_uuid,
        email=request.email,
        role=request.role,
        message=request.message,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@household_router.get(
    "/{household_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=InvitationListResponse,
)
async def list_household_invitations(
    household_id: str,
    status_filter: Optional[str] = Query(None, alias="status"),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")

    use_case = ListHouseholdInvitationsUseCase(uow)
    result = await use_case.execute(current_user["user_id"], household_uuid, status_filter)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@household_router.delete(
    "/{household_id}/invitations/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=InvitationStatusResponse,
)
async def revoke_invitation(
    household_id: str,
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke Invitation

    Marks a pending invitation expired. Allowed for the inviter and for
    members with can_invite_members.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")
    invitation_uuid = parse_uuid(invitation_id, "INVALID_INVITATION_ID", "invitation ID")

    use_case = RevokeInvitationUseCase(uow)
    result = await use_case.execute(current_user["user_id"], household_uuid, invitation_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@household_router.post(
    "/{household_id}/invitations/{invitation_id}/resend",
    status_code=status.HTTP_200_OK,
    response_model=CreatedInvitationResponse,
)
async def resend_invitation(
    household_id: str,
    invitation_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Resend Invitation

    Issues a new token and a fresh expiry; the previous token stops working.

    Raises:
        - 403 Forbidden: NOT_A_MEMBER, PERMISSION_DENIED
        - 404 Not Found: INVITATION_NOT_FOUND, HOUSEHOLD_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING, MEMBER_LIMIT_REACHED
    """
    household_uuid = parse_uuid(household_id, "INVALID_HOUSEHOLD_ID", "household ID")
    invitation_uuid = parse_uuid(invitation_id, "INVALID_INVITATION_ID", "invitation ID")

    use_case = ResendInvitationUseCase(uow, ttl_hours=ApplicationConfig.INVITATION_TTL_HOURS)
    result = await use_case.execute(current_user["user_id"], household_uuid, invitation_uuid)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/mine",
    status_code=status.HTTP_200_OK,
    response_model=InvitationListResponse,
)
async def list_my_invitations(
    status_filter: Optional[str] = Query(None, alias="status"),
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListMyInvitationsUseCase(uow)
    result = await use_case.execute(current_user.get("email"), status_filter)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{token}",
    status_code=status.HTTP_200_OK,
    response_model=InvitationDetailResponse,
)
async def get_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Invitation

    Public lookup by token; the status shown is the effective one.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
    """
    result = await GetInvitationUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{token}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    token: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    The caller's email must match the invited email.

    Raises:
        - 403 Forbidden: EMAIL_MISMATCH
        - 404 Not Found: INVITATION_NOT_FOUND, HOUSEHOLD_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING, ALREADY_MEMBER, MEMBER_LIMIT_REACHED
    """
    use_case = AcceptInvitationUseCase(uow)
    result = await use_case.execute(
        token=token,
        user_id=current_user["user_id"],
        email=current_user.get("email"),
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{token}/decline",
    status_code=status.HTTP_200_OK,
    response_model=InvitationStatusResponse,
)
async def decline_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Decline Invitation

    Holding the token is enough to decline.

    Raises:
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_NOT_PENDING
    """
    result = await DeclineInvitationUseCase(uow).execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
