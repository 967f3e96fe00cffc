"""
Member Use Case DTOs
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from household_access.domain.entities import Membership, MembershipRole
from household_access.domain.policies import merge_permissions


class MemberInfo(BaseModel):
    """Membership as seen by other household members"""

    membership_id: str
    user_id: str
    email: Optional[str] = None
    role: str
    permissions: Dict[str, bool]
    permission_overrides: Dict[str, bool]
    is_active: bool
    invited_by: Optional[str] = None
    joined_at: datetime
    last_active_at: Optional[datetime] = None

    @classmethod
    def from_membership(cls, membership: Membership) -> "MemberInfo":
        return cls(
            membership_id=str(membership.id),
            user_id=membership.user_id,
            email=membership.email,
            role=MembershipRole(membership.role).value,
            permissions=merge_permissions(membership.role, membership.permissions),
            permission_overrides=dict(membership.permissions or {}),
            is_active=membership.is_active,
            invited_by=membership.invited_by,
            joined_at=membership.joined_at,
            last_active_at=membership.last_active_at,
        )


class MemberListResponse(BaseModel):
    members: List[MemberInfo]


class RemoveMemberResponse(BaseModel):
    """Response for remove member / leave household use cases"""

    status: str
    member_count: int


class UpdateMemberResponse(BaseModel):
    """Response for role and permission updates"""

    status: str
    membership: MemberInfo


class TouchLastActiveResponse(BaseModel):
    updated: bool


class TransferOwnershipResponse(BaseModel):
    status: str
    previous_owner: MemberInfo
    new_owner: MemberInfo
