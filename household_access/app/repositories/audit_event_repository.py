from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from household_access.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """AuditEvent repository interface - application layer"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        """Append an audit event"""
        pass

    @abstractmethod
    async def get_by_household_paginated(
        self, household_id: UUID, limit: int = 50, cursor: Optional[str] = None
    ) -> Tuple[List[AuditEvent], Optional[str]]:
        """Get audit events for a household, newest first, with a cursor"""
        pass
