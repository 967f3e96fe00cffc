"""
Can Manage Member Use Case

Read-only answer to "may this user act on that member".
"""

from uuid import UUID

from household_access.app.services.unit_of_work import UnitOfWork
from household_access.domain import errors
from household_access.domain.entities import MemberAction
from household_access.domain.policies import ManageDecision, can_manage_member
from household_access.libs.result import Error, Result, Return


class CanManageMemberUseCase:
    """
    Use case for querying a member-management decision.

    A denial is a successful result carrying can_manage=False; only an
    unknown action is an error.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_user_id: str,
        household_id: UUID,
        target_user_id: str,
        action: str,
    ) -> Result[ManageDecision]:
        try:
            member_action = MemberAction(action)
        except ValueError:
            return Return.err(
                Error(
                    errors.INVALID_ACTION,
                    f"Invalid action: {action}. Must be one of: "
                    + ", ".join(a.value for a in MemberAction),
                )
            )

        async with self.uow:
            actor = await self.uow.memberships.get_by_household_and_user(
                household_id, actor_user_id
            )
            target = await self.uow.memberships.get_by_household_and_user(
                household_id, target_user_id
            )
            if target is not None and not target.is_active:
                target = None

            owner_count = await self.uow.memberships.count_active_owners(household_id)

            return Return.ok(can_manage_member(actor, target, member_action, owner_count))
