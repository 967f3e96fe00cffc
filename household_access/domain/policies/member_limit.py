from typing import Optional

from pydantic import BaseModel

from household_access.domain.entities import Household

MEMBER_LIMIT_REASON = "Household has reached maximum member limit"


class MemberLimit(BaseModel):
    has_limit: bool
    max_members: int
    current_member_count: int
    can_add_members: bool
    remaining_slots: int
    reason: Optional[str] = None


def check_member_limit(household: Household) -> MemberLimit:
    """Compare the maintained member_count against settings.max_members."""
    max_members = household.get_settings().max_members
    current = household.member_count
    can_add = current < max_members

    return MemberLimit(
        has_limit=True,
        max_members=max_members,
        current_member_count=current,
        can_add_members=can_add,
        remaining_slots=max(0, max_members - current),
        reason=None if can_add else MEMBER_LIMIT_REASON,
    )
