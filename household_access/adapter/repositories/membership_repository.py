from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from household_access.app.repositories.membership_repository import IMembershipRepository
from household_access.domain.entities import Membership, MembershipRole


class MembershipRepository(IMembershipRepository):
    """Membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        stmt = select(Membership).where(Membership.id == membership_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_household_and_user(
        self, household_id: UUID, user_id: str
    ) -> Optional[Membership]:
        """Get membership by household and user"""
        stmt = select(Membership).where(
            Membership.household_id == household_id, Membership.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_by_household_and_email(
        self, household_id: UUID, email: str
    ) -> Optional[Membership]:
        """Get active membership by household and exact email"""
        stmt = select(Membership).where(
            Membership.household_id == household_id,
            Membership.email == email,
            Membership.is_active == True,  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_household_id(
        self, household_id: UUID, active_only: bool = False
    ) -> List[Membership]:
        """Get memberships for a household, oldest first"""
        stmt = select(Membership).where(Membership.household_id == household_id)
        if active_only:
            stmt = stmt.where(Membership.is_active == True)  # noqa: E712
        stmt = stmt.order_by(Membership.joined_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_user_id(self, user_id: str) -> List[Membership]:
        """Get all memberships for a user"""
        stmt = select(Membership).where(Membership.user_id == user_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_active_owners(self, household_id: UUID) -> int:
        """Count active owner memberships in a household"""
        stmt = (
            select(func.count())
            .select_from(Membership)
            .where(
                Membership.household_id == household_id,
                Membership.role == MembershipRole.owner,
                Membership.is_active == True,  # noqa: E712
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership
