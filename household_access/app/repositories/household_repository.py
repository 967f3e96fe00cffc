from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from household_access.domain.entities import Household


class IHouseholdRepository(ABC):
    """Household repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, household_id: UUID) -> Optional[Household]:
        """Get household by ID"""
        pass

    @abstractmethod
    async def get_by_id_for_update(self, household_id: UUID) -> Optional[Household]:
        """Get household by ID, locking the row for the current transaction"""
        pass

    @abstractmethod
    async def get_active_by_invite_code(self, invite_code: str) -> Optional[Household]:
        """Get an active household by its shareable invite code"""
        pass

    @abstractmethod
    async def create(self, household: Household) -> Household:
        """Create a new household"""
        pass

    @abstractmethod
    async def update(self, household: Household) -> Household:
        """Update existing household"""
        pass
