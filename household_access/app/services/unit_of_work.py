from abc import ABC, abstractmethod

from household_access.app.repositories.audit_event_repository import IAuditEventRepository
from household_access.app.repositories.household_repository import IHouseholdRepository
from household_access.app.repositories.invitation_repository import IInvitationRepository
from household_access.app.repositories.membership_repository import IMembershipRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    households: IHouseholdRepository
    memberships: IMembershipRepository
    invitations: IInvitationRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
