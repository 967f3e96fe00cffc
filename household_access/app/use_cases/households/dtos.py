"""
Household Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from household_access.app.use_cases.members.dtos import MemberInfo
from household_access.domain.entities import Household, HouseholdSettings


class HouseholdResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    owner_id: str
    member_count: int
    settings: HouseholdSettings
    is_active: bool
    created_at: datetime

    @classmethod
    def from_household(cls, household: Household) -> "HouseholdResponse":
        return cls(
            id=str(household.id),
            name=household.name,
            description=household.description,
            owner_id=household.owner_id,
            member_count=household.member_count,
            settings=household.get_settings(),
            is_active=household.is_active,
            created_at=household.created_at,
        )


class HouseholdDetailResponse(HouseholdResponse):
    """
    Household with the caller's role and the active members.

    The invite code is only filled in for members who may invite.
    """

    role: str
    members: List[MemberInfo]
    invite_code: Optional[str] = None
    invite_code_expires_at: Optional[datetime] = None


class HouseholdInfo(BaseModel):
    """Household summary returned alongside a membership"""

    id: str
    name: str
    role: str


class InviteCodeResponse(BaseModel):
    invite_code: str
    expires_at: datetime


class JoinHouseholdResponse(BaseModel):
    """Response for joining a household with its invite code"""

    status: str
    household: HouseholdInfo
    membership: MemberInfo


class DeleteHouseholdResponse(BaseModel):
    status: str
    memberships_deactivated: int


class HouseholdListResponse(BaseModel):
    households: List[HouseholdInfo]
