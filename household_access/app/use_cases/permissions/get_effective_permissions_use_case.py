"""
Get Effective Permissions Use Case
"""

from uuid import UUID

from household_access.app.services.authorization import not_a_member_error
from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain.policies import EffectivePermissions, resolve_effective_permissions
from household_access.libs.result import Result, Return


class GetEffectivePermissionsUseCase:
    """
    Use case for resolving a user's effective permissions in a household.

    Business Rules:
    - Missing or inactive membership yields NOT_A_MEMBER
    - Role defaults are overlaid by every stored override
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str, household_id: UUID) -> Result[EffectivePermissions]:
        async with self.uow:
            membership = await self.uow.memberships.get_by_household_and_user(
                household_id, user_id
            )

            effective = resolve_effective_permissions(membership)
            if effective is None:
                return Return.err(not_a_member_error())

            return Return.ok(effective)
