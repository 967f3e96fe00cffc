"""
Check Permission Use Cases

Single and multi permission checks. A denial is a successful result; only
unknown permission names are errors.
"""

from typing import List
from uuid import UUID

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.entities import Permission
from household_access.domain.policies import (
    MultiPermissionCheck,
    PermissionCheck,
    has_all_permissions,
    has_permission,
)
from household_access.libs.result import Error, Result, Return


def _invalid_permission(name: str) -> Error:
    return Error(errors.INVALID_PERMISSION, f"Unknown permission: {name}")


class CheckPermissionUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, household_id: UUID, permission: str
    ) -> Result[PermissionCheck]:
        try:
            requested = Permission(permission)
        except ValueError:
            return Return.err(_invalid_permission(permission))

        async with self.uow:
            membership = await self.uow.memberships.get_by_household_and_user(
                household_id, user_id
            )
            return Return.ok(has_permission(membership, requested))


class CheckPermissionsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: str, household_id: UUID, permissions: List[str]
    ) -> Result[MultiPermissionCheck]:
        requested = []
        for name in permissions:
            try:
                requested.append(Permission(name))
            except ValueError:
                return Return.err(_invalid_permission(name))

        async with self.uow:
            membership = await self.uow.memberships.get_by_household_and_user(
                household_id, user_id
            )
            return Return.ok(has_all_permissions(membership, requested))
