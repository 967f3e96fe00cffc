from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from household_access.app.repositories.household_repository import IHouseholdRepository
from household_access.domain.entities import Household


class HouseholdRepository(IHouseholdRepository):
    """Household repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, household_id: UUID) -> Optional[Household]:
        """Get household by ID"""
        stmt = select(Household).where(Household.id == household_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id_for_update(self, household_id: UUID) -> Optional[Household]:
        """Get household by ID with SELECT ... FOR UPDATE"""
        stmt = (
            select(Household)
            .where(Household.id == household_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_invite_code(self, invite_code: str) -> Optional[Household]:
        """Get an active household by its shareable invite code"""
        stmt = select(Household).where(
            Household.invite_code == invite_code,
            Household.is_active == True,  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, household: Household) -> Household:
        """Create a new household"""
        self.session.add(household)
        await self.session.flush()
        await self.session.refresh(household)
        return household

    async def update(self, household: Household) -> Household:
        """Update existing household"""
        self.session.add(household)
        await self.session.flush()
        await self.session.refresh(household)
        return household
