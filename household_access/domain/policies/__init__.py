"""
Pure access-control decisions.

Nothing in this package touches storage; callers pass loaded entities.
"""

from .invitations import (
    DEFAULT_INVITATION_TTL_HOURS,
    compute_expiry,
    effective_status,
    generate_invite_token,
    is_effectively_pending,
    is_lazily_expired,
)
from .invite_codes import (
    DEFAULT_INVITE_CODE_TTL_DAYS,
    generate_invite_code,
    invite_code_expiry,
    is_invite_code_expired,
    normalize_invite_code,
)
from .member_limit import MemberLimit, check_member_limit
from .member_management import ManageDecision, can_manage_member
from .permissions import (
    ROLE_DEFAULT_PERMISSIONS,
    EffectivePermissions,
    MultiPermissionCheck,
    PermissionCheck,
    has_all_permissions,
    has_permission,
    is_active_member,
    merge_permissions,
    resolve_effective_permissions,
    role_default_permissions,
)

__all__ = [
    "DEFAULT_INVITATION_TTL_HOURS",
    "compute_expiry",
    "effective_status",
    "generate_invite_token",
    "is_effectively_pending",
    "is_lazily_expired",
    "DEFAULT_INVITE_CODE_TTL_DAYS",
    "generate_invite_code",
    "invite_code_expiry",
    "is_invite_code_expired",
    "normalize_invite_code",
    "MemberLimit",
    "check_member_limit",
    "ManageDecision",
    "can_manage_member",
    "ROLE_DEFAULT_PERMISSIONS",
    "EffectivePermissions",
    "MultiPermissionCheck",
    "PermissionCheck",
    "has_all_permissions",
    "has_permission",
    "is_active_member",
    "merge_permissions",
    "resolve_effective_permissions",
    "role_default_permissions",
]
