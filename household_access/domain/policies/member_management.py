"""
Member-management authorization.

Decides whether an acting membership may remove, re-role, re-permission or
view a target membership of the same household. Rules are evaluated in
order and the first match decides.

Role changes are owner-only and self role/permission changes are always
denied, so a can_manage_members grant can never be turned into an owner
role.
"""

from typing import Optional

from pydantic import BaseModel

from household_access.domain import errors
from household_access.domain.entities import MemberAction, Membership, MembershipRole, Permission

from .permissions import has_permission, is_active_member


class ManageDecision(BaseModel):
    can_manage: bool
    reason: Optional[str] = None
    code: Optional[str] = None


def _allow() -> ManageDecision:
    return ManageDecision(can_manage=True)


def _deny(code: str, reason: str) -> ManageDecision:
    return ManageDecision(can_manage=False, reason=reason, code=code)


def can_manage_member(
    actor: Optional[Membership],
    target: Optional[Membership],
    action: MemberAction,
    active_owner_count: int,
) -> ManageDecision:
    """
    Args:
        actor: Acting user's membership (None if not found)
        target: Target user's membership (None if not found)
        action: Requested management action
        active_owner_count: Active owner memberships in the household, taken
            inside the caller's transaction

    Returns:
        ManageDecision; denials carry a reason and an error code
    """
    action = MemberAction(action)

    if not is_active_member(actor):
        return _deny(
            errors.NOT_A_MEMBER, "Actor is not an active member of this household"
        )

    if target is None:
        return _deny(
            errors.MEMBERSHIP_NOT_FOUND,
            "Target user is not a member of this household",
        )

    if actor.user_id == target.user_id:
        if action == MemberAction.remove:
            if actor.role == MembershipRole.owner and active_owner_count <= 1:
                return _deny(
                    errors.LAST_OWNER_PROTECTED,
                    "Cannot remove the last owner of the household",
                )
            return _allow()

        if action == MemberAction.view_details:
            return _allow()

        return _deny(
            errors.SELF_ESCALATION_DENIED,
            "Cannot modify your own role or permissions",
        )

    is_owner = actor.role == MembershipRole.owner
    can_manage_members = has_permission(actor, Permission.can_manage_members).has_permission

    if action == MemberAction.view_details:
        return _allow()

    if action == MemberAction.remove:
        if is_owner:
            return _allow()
        if can_manage_members and target.role == MembershipRole.member:
            return _allow()
        return _deny(
            errors.PERMISSION_DENIED, "Insufficient permissions to remove this member"
        )

    if action == MemberAction.update_role:
        if is_owner:
            return _allow()
        return _deny(errors.PERMISSION_DENIED, "Only owners can change member roles")

    # update_permissions
    if is_owner:
        return _allow()
    if can_manage_members and target.role != MembershipRole.owner:
        return _allow()
    return _deny(
        errors.PERMISSION_DENIED,
        "Insufficient permissions to update this member's permissions",
    )
