from household_access.domain.entities import MembershipRole, Permission
from household_access.domain.policies import role_default_permissions
from household_access.libs.result import Result, Return

from .dtos import RolePermissions, RolePermissionsResponse


class GetRolePermissionsUseCase:
    """Publish the role default table. Needs no storage."""

    async def execute(self) -> Result[RolePermissionsResponse]:
        return Return.ok(
            RolePermissionsResponse(
                roles=[
                    RolePermissions(
                        role=role.value, permissions=role_default_permissions(role)
                    )
                    for role in MembershipRole
                ],
                permissions=[p.value for p in Permission],
            )
        )
