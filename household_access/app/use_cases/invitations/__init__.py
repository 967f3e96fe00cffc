"""
Invitation Use Cases

Invitation lifecycle: create, review, accept, decline, revoke and resend.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase
from .decline_invitation_use_case import DeclineInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    CreatedInvitationResponse,
    InvitationDetailResponse,
    InvitationListResponse,
    InvitationResponse,
    InvitationStatusResponse,
)
from .get_invitation_use_case import GetInvitationUseCase
from .list_invitations_use_case import (
    ListHouseholdInvitationsUseCase,
    ListMyInvitationsUseCase,
)
from .resend_invitation_use_case import ResendInvitationUseCase
from .revoke_invitation_use_case import RevokeInvitationUseCase

__all__ = [
    "AcceptInvitationUseCase",
    "CreateInvitationUseCase",
    "DeclineInvitationUseCase",
    "GetInvitationUseCase",
    "ListHouseholdInvitationsUseCase",
    "ListMyInvitationsUseCase",
    "ResendInvitationUseCase",
    "RevokeInvitationUseCase",
    "AcceptInvitationResponse",
    "CreatedInvitationResponse",
    "InvitationDetailResponse",
    "InvitationListResponse",
    "InvitationResponse",
    "InvitationStatusResponse",
]
