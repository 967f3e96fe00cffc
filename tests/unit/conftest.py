import pytest
from unittest.mock import AsyncMock, MagicMock

from household_access.domain.entities import MembershipRole
from tests.unit.factories import NOW, make_household, make_membership


def echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Repositories: every method is awaitable, create/update hand back the entity
    for name in ("households", "memberships", "invitations", "audit_events"):
        repo = AsyncMock()
        repo.create.side_effect = echo
        repo.update.side_effect = echo
        setattr(uow, name, repo)

    uow.memberships.count_active_owners.return_value = 1
    return uow


@pytest.fixture
def clock():
    return lambda: NOW


@pytest.fixture
def household():
    return make_household()


@pytest.fixture
def owner(household):
    return make_membership(household.id, "owner-1", MembershipRole.owner, email="owner@example.com")


@pytest.fixture
def admin(household):
    return make_membership(household.id, "admin-1", MembershipRole.admin, email="admin@example.com")


@pytest.fixture
def plain_member(household):
    return make_membership(household.id, "member-1", MembershipRole.member, email="member@example.com")
