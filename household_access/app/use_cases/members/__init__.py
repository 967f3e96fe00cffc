from .can_manage_member_use_case import CanManageMemberUseCase
from .change_role_use_case import ChangeRoleUseCase
from .dtos import (
    MemberInfo,
    MemberListResponse,
    RemoveMemberResponse,
    TouchLastActiveResponse,
    TransferOwnershipResponse,
    UpdateMemberResponse,
)
from .leave_household_use_case import LeaveHouseholdUseCase
from .list_members_use_case import ListMembersUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .touch_last_active_use_case import TouchLastActiveUseCase
from .transfer_ownership_use_case import TransferOwnershipUseCase
from .update_member_permissions_use_case import UpdateMemberPermissionsUseCase

__all__ = [
    "CanManageMemberUseCase",
    "ChangeRoleUseCase",
    "LeaveHouseholdUseCase",
    "ListMembersUseCase",
    "RemoveMemberUseCase",
    "TouchLastActiveUseCase",
    "TransferOwnershipUseCase",
    "UpdateMemberPermissionsUseCase",
    "MemberInfo",
    "MemberListResponse",
    "RemoveMemberResponse",
    "TouchLastActiveResponse",
    "TransferOwnershipResponse",
    "UpdateMemberResponse",
]
