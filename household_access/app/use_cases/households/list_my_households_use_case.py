from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain.entities import MembershipRole
from household_access.libs.result import Result, Return

from .dtos import HouseholdInfo, HouseholdListResponse


class ListMyHouseholdsUseCase:
    """Households where the caller holds an active membership."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: str) -> Result[HouseholdListResponse]:
        async with self.uow:
            memberships = await self.uow.memberships.get_by_user_id(user_id)

            households = []
            for membership in memberships:
                if not membership.is_active:
                    continue
                household = await self.uow.households.get_by_id(membership.household_id)
                if household is None or not household.is_active:
                    continue
                households.append(
                    HouseholdInfo(
                        id=str(household.id),
                        name=household.name,
                        role=MembershipRole(membership.role).value,
                    )
                )

            return Return.ok(HouseholdListResponse(households=households))
