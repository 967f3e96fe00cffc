from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from household_access.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_household_and_email(
        self, household_id: UUID, email: str
    ) -> List[Invitation]:
        """Get invitations stored as pending for a household and email"""
        pass

    @abstractmethod
    async def get_by_household_id(self, household_id: UUID) -> List[Invitation]:
        """Get all invitations for a household"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> List[Invitation]:
        """Get all invitations addressed to an email"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass
