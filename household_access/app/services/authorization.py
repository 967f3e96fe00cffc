"""
Authorization helpers for command-style use cases.

Query-style use cases return the resolver's structured answer as-is; the
helpers here turn a denial into an Error so mutating use cases can bail out
with ``Return.err``.
"""

from typing import Optional
from uuid import UUID

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.entities import Invitation, Membership, Permission
from household_access.domain.policies import ManageDecision, has_permission, is_active_member
from household_access.libs.result import Error, Result, Return


def not_a_member_error() -> Error:
    return Error(errors.NOT_A_MEMBER, "You are not an active member of this household")


def decision_error(decision: ManageDecision) -> Error:
    """Error for a denied member-management decision"""
    return Error(decision.code or errors.PERMISSION_DENIED, decision.reason)


async def require_active_membership(
    uow: UnitOfWork, household_id: UUID, user_id: str
) -> Result[Membership]:
    membership = await uow.memberships.get_by_household_and_user(household_id, user_id)
    if not is_active_member(membership):
        return Return.err(not_a_member_error())
    return Return.ok(membership)


async def require_permission(
    uow: UnitOfWork,
    household_id: UUID,
    user_id: str,
    permission: Permission,
    message: Optional[str] = None,
) -> Result[Membership]:
    """
    Load the caller's membership and check one effective permission.

    Returns:
        Result with the membership, or NOT_A_MEMBER / PERMISSION_DENIED
    """
    membership_result = await require_active_membership(uow, household_id, user_id)
    if membership_result.is_err():
        return membership_result

    membership = membership_result.value
    check = has_permission(membership, permission)
    if not check.has_permission:
        return Return.err(
            Error(
                errors.PERMISSION_DENIED,
                message or "You do not have permission to perform this action",
                reason=check.reason,
            )
        )

    return Return.ok(membership)


async def require_invitation_manager(
    uow: UnitOfWork, invitation: Invitation, user_id: str
) -> Result[Membership]:
    """
    Revoke and resend are open to the original inviter and to any member
    with effective can_invite_members.
    """
    membership_result = await require_active_membership(
        uow, invitation.household_id, user_id
    )
    if membership_result.is_err():
        return membership_result

    membership = membership_result.value
    if invitation.invited_by == user_id:
        return Return.ok(membership)

    check = has_permission(membership, Permission.can_invite_members)
    if not check.has_permission:
        return Return.err(
            Error(
                errors.PERMISSION_DENIED,
                "You do not have permission to manage this invitation",
                reason=check.reason,
            )
        )

    return Return.ok(membership)
