from sqlmodel.ext.asyncio.session import AsyncSession

from household_access.adapter.repositories.audit_event_repository import AuditEventRepository
from household_access.adapter.repositories.household_repository import HouseholdRepository
from household_access.adapter.repositories.invitation_repository import InvitationRepository
from household_access.adapter.repositories.membership_repository import MembershipRepository
from household_access.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.households = HouseholdRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
