from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from household_access.domain.entities import Membership


class IMembershipRepository(ABC):
    """Membership repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, membership_id: UUID) -> Optional[Membership]:
        """Get membership by ID"""
        pass

    @abstractmethod
    async def get_by_household_and_user(
        self, household_id: UUID, user_id: str
    ) -> Optional[Membership]:
        """Get membership by household and user"""
        pass

    @abstractmethod
    async def get_active_by_household_and_email(
        self, household_id: UUID, email: str
    ) -> Optional[Membership]:
        """Get active membership by household and exact email"""
        pass

    @abstractmethod
    async def get_by_household_id(
        self, household_id: UUID, active_only: bool = False
    ) -> List[Membership]:
        """Get memberships for a household"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[Membership]:
        """Get all memberships for a user"""
        pass

    @abstractmethod
    async def count_active_owners(self, household_id: UUID) -> int:
        """Count active owner memberships in a household"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, membership: Membership) -> Membership:
        """Update existing membership"""
        pass
