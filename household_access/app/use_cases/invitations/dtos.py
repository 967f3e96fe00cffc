"""
Invitation Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from household_access.app.use_cases.households.dtos import HouseholdInfo
from household_access.app.use_cases.members.dtos import MemberInfo
from household_access.domain.entities import Invitation, MembershipRole
from household_access.domain.policies import effective_status


class InvitationResponse(BaseModel):
    """Invitation with its effective status; the token is never included"""

    id: str
    household_id: str
    email: str
    role: str
    status: str
    invited_by: str
    message: Optional[str] = None
    expires_at: datetime
    created_at: datetime
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[str] = None

    @classmethod
    def from_invitation(cls, invitation: Invitation, now: datetime, **extra):
        return cls(
            id=str(invitation.id),
            household_id=str(invitation.household_id),
            email=invitation.email,
            role=MembershipRole(invitation.role).value,
            status=effective_status(invitation, now).value,
            invited_by=invitation.invited_by,
            message=invitation.message,
            expires_at=invitation.expires_at,
            created_at=invitation.created_at,
            accepted_at=invitation.accepted_at,
            accepted_by=invitation.accepted_by,
            **extra,
        )


class CreatedInvitationResponse(InvitationResponse):
    """Returned to the inviter on create and resend"""

    invite_token: str


class InvitationDetailResponse(InvitationResponse):
    household_name: Optional[str] = None


class InvitationListResponse(BaseModel):
    invitations: List[InvitationDetailResponse]


class AcceptInvitationResponse(BaseModel):
    status: str
    household: HouseholdInfo
    membership: MemberInfo


class InvitationStatusResponse(BaseModel):
    """Response for decline and revoke"""

    invitation_id: str
    status: str
