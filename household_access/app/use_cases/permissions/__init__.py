"""
Permission Use Cases

Read-only permission and capacity queries.
"""

from .check_member_limit_use_case import CheckMemberLimitUseCase
from .check_permission_use_case import CheckPermissionsUseCase, CheckPermissionUseCase
from .dtos import RolePermissions, RolePermissionsResponse
from .get_effective_permissions_use_case import GetEffectivePermissionsUseCase
from .get_role_permissions_use_case import GetRolePermissionsUseCase

__all__ = [
    "CheckMemberLimitUseCase",
    "CheckPermissionUseCase",
    "CheckPermissionsUseCase",
    "GetEffectivePermissionsUseCase",
    "GetRolePermissionsUseCase",
    "RolePermissions",
    "RolePermissionsResponse",
]
