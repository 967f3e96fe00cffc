"""
Permission resolution.

Effective permissions are the role defaults overlaid with every key present
in the membership's override map. Presence decides the overlay, so an
override can both grant and revoke.
"""

from datetime import datetime
from typing import Dict, Iterable, Mapping, Optional

from pydantic import BaseModel

from household_access.domain.entities import Membership, MembershipRole, Permission

NOT_ACTIVE_MEMBER_REASON = "User is not an active member of this household"

ROLE_DEFAULT_PERMISSIONS: Dict[MembershipRole, Dict[Permission, bool]] = {
    MembershipRole.owner: {
        Permission.can_manage_inventory: True,
        Permission.can_manage_shopping_lists: True,
        Permission.can_manage_categories: True,
        Permission.can_invite_members: True,
        Permission.can_manage_members: True,
        Permission.can_edit_household_settings: True,
        Permission.can_delete_household: True,
    },
    MembershipRole.admin: {
        Permission.can_manage_inventory: True,
        Permission.can_manage_shopping_lists: True,
        Permission.can_manage_categories: True,
        Permission.can_invite_members: True,
        Permission.can_manage_members: False,
        Permission.can_edit_household_settings: True,
        Permission.can_delete_household: False,
    },
    MembershipRole.member: {
        Permission.can_manage_inventory: False,
        Permission.can_manage_shopping_lists: True,
        Permission.can_manage_categories: False,
        Permission.can_invite_members: False,
        Permission.can_manage_members: False,
        Permission.can_edit_household_settings: False,
        Permission.can_delete_household: False,
    },
}


class EffectivePermissions(BaseModel):
    role: MembershipRole
    permissions: Dict[str, bool]
    is_active: bool
    joined_at: Optional[datetime] = None
    last_active_at: Optional[datetime] = None


class PermissionCheck(BaseModel):
    has_permission: bool
    reason: Optional[str] = None


class MultiPermissionCheck(BaseModel):
    is_valid: bool
    permissions: Dict[str, bool]
    reason: Optional[str] = None


def role_default_permissions(role: MembershipRole) -> Dict[str, bool]:
    """Role defaults keyed by permission name"""
    return {
        permission.value: granted
        for permission, granted in ROLE_DEFAULT_PERMISSIONS[MembershipRole(role)].items()
    }


def merge_permissions(
    role: MembershipRole, overrides: Optional[Mapping[str, bool]]
) -> Dict[str, bool]:
    merged = role_default_permissions(role)
    for key, value in (overrides or {}).items():
        if key in merged:
            merged[key] = bool(value)
    return merged


def is_active_member(membership: Optional[Membership]) -> bool:
    return membership is not None and membership.is_active


def resolve_effective_permissions(
    membership: Optional[Membership],
) -> Optional[EffectivePermissions]:
    """
    Compute the full permission map for a membership.

    Returns:
        EffectivePermissions, or None if the membership is missing or
        inactive (an inactive membership has no standing whatever its role)
    """
    if not is_active_member(membership):
        return None

    return EffectivePermissions(
        role=membership.role,
        permissions=merge_permissions(membership.role, membership.permissions),
        is_active=membership.is_active,
        joined_at=membership.joined_at,
        last_active_at=membership.last_active_at,
    )


def has_permission(
    membership: Optional[Membership], permission: Permission
) -> PermissionCheck:
    effective = resolve_effective_permissions(membership)
    if effective is None:
        return PermissionCheck(has_permission=False, reason=NOT_ACTIVE_MEMBER_REASON)

    name = Permission(permission).value
    if effective.permissions[name]:
        return PermissionCheck(has_permission=True)

    return PermissionCheck(
        has_permission=False, reason=f"User does not have {name} permission"
    )


def has_all_permissions(
    membership: Optional[Membership], permissions: Iterable[Permission]
) -> MultiPermissionCheck:
    names = [Permission(p).value for p in permissions]
    effective = resolve_effective_permissions(membership)

    if effective is None:
        return MultiPermissionCheck(
            is_valid=False,
            permissions={name: False for name in names},
            reason=NOT_ACTIVE_MEMBER_REASON,
        )

    results = {name: effective.permissions[name] for name in names}
    return MultiPermissionCheck(is_valid=all(results.values()), permissions=results)
