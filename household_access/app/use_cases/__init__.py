"""
Use Cases

Organized into domain folders:
- households/: Household lifecycle and settings
- members/: Member listing and management
- permissions/: Permission and capacity queries
- invitations/: Invitation lifecycle
- audit/: Audit logs
"""

from .audit import GetAuditEventsUseCase
from .households import (
    CreateHouseholdUseCase,
    DeleteHouseholdUseCase,
    GetHouseholdUseCase,
    JoinByCodeUseCase,
    ListMyHouseholdsUseCase,
    RegenerateInviteCodeUseCase,
    UpdateHouseholdSettingsUseCase,
)
from .invitations import (
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    DeclineInvitationUseCase,
    GetInvitationUseCase,
    ListHouseholdInvitationsUseCase,
    ListMyInvitationsUseCase,
    ResendInvitationUseCase,
    RevokeInvitationUseCase,
)
from .members import (
    CanManageMemberUseCase,
    ChangeRoleUseCase,
    LeaveHouseholdUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
    TouchLastActiveUseCase,
    TransferOwnershipUseCase,
    UpdateMemberPermissionsUseCase,
)
from .permissions import (
    CheckMemberLimitUseCase,
    CheckPermissionsUseCase,
    CheckPermissionUseCase,
    GetEffectivePermissionsUseCase,
    GetRolePermissionsUseCase,
)

__all__ = [
    # Households
    "CreateHouseholdUseCase",
    "DeleteHouseholdUseCase",
    "GetHouseholdUseCase",
    "JoinByCodeUseCase",
    "ListMyHouseholdsUseCase",
    "RegenerateInviteCodeUseCase",
    "UpdateHouseholdSettingsUseCase",
    # Members
    "CanManageMemberUseCase",
    "ChangeRoleUseCase",
    "LeaveHouseholdUseCase",
    "ListMembersUseCase",
    "RemoveMemberUseCase",
    "TouchLastActiveUseCase",
    "TransferOwnershipUseCase",
    "UpdateMemberPermissionsUseCase",
    # Permissions
    "CheckMemberLimitUseCase",
    "CheckPermissionUseCase",
    "CheckPermissionsUseCase",
    "GetEffectivePermissionsUseCase",
    "GetRolePermissionsUseCase",
    # Invitations
    "AcceptInvitationUseCase",
    "CreateInvitationUseCase",
    "DeclineInvitationUseCase",
    "GetInvitationUseCase",
    "ListHouseholdInvitationsUseCase",
    "ListMyInvitationsUseCase",
    "ResendInvitationUseCase",
    "RevokeInvitationUseCase",
    # Audit
    "GetAuditEventsUseCase",
]
