from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from household_access.app.repositories.invitation_repository import IInvitationRepository
from household_access.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.invite_token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_household_and_email(
        self, household_id: UUID, email: str
    ) -> List[Invitation]:
        """Get invitations stored as pending for a household and email"""
        stmt = select(Invitation).where(
            Invitation.household_id == household_id,
            Invitation.email == email,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_household_id(self, household_id: UUID) -> List[Invitation]:
        """Get all invitations for a household, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.household_id == household_id)
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_email(self, email: str) -> List[Invitation]:
        """Get all invitations addressed to an email, newest first"""
        stmt = (
            select(Invitation)
            .where(Invitation.email == email)
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation
