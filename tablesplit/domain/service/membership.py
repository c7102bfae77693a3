"""Group membership applier."""

from abc import ABC, abstractmethod

import logfire

from tablesplit.domain.error import DependencyFailureError, DomainError
from tablesplit.domain.repository import GroupRepository
from tablesplit.domain.value import ExpenseId, GroupId, UserId

from .base import Service


class MembershipApplier(ABC):
    """Adds accepting users to groups and expenses.

    Both operations must be idempotent; failures raise
    DependencyFailureError.
    """

    @abstractmethod
    async def add_member(self, group_id: GroupId, user_id: UserId) -> None:
        """Add a user to a group's membership set."""
        pass

    @abstractmethod
    async def add_expense_participant(
        self, expense_id: ExpenseId, user_id: UserId
    ) -> None:
        """Add a user to an expense's participant set."""
        pass


class GroupMembershipApplier(Service, MembershipApplier):
    """Membership applier backed by the group directory."""

    def __init__(self, group_repository: GroupRepository) -> None:
        """Initialize membership applier.

        Args:
            group_repository: Group repository
        """
        self.group_repository = group_repository

    async def add_member(self, group_id: GroupId, user_id: UserId) -> None:
        with logfire.span(
            "membership.add_member", group_id=str(group_id), user_id=str(user_id)
        ):
            try:
                added = await self.group_repository.add_member(group_id, user_id)
            except DomainError:
                raise
            except Exception as e:
                logfire.error(
                    "Membership update failed",
                    group_id=str(group_id),
                    user_id=str(user_id),
                    error=str(e),
                )
                raise DependencyFailureError("Group membership update failed") from e
            logfire.info(
                "Member added" if added else "Already a member",
                group_id=str(group_id),
                user_id=str(user_id),
            )

    async def add_expense_participant(
        self, expense_id: ExpenseId, user_id: UserId
    ) -> None:
        with logfire.span(
            "membership.add_expense_participant",
            expense_id=str(expense_id),
            user_id=str(user_id),
        ):
            try:
                added = await self.group_repository.add_expense_participant(
                    expense_id, user_id
                )
            except DomainError:
                raise
            except Exception as e:
                logfire.error(
                    "Expense participant update failed",
                    expense_id=str(expense_id),
                    user_id=str(user_id),
                    error=str(e),
                )
                raise DependencyFailureError(
                    "Expense participant update failed"
                ) from e
            logfire.info(
                "Expense participant added" if added else "Already a participant",
                expense_id=str(expense_id),
                user_id=str(user_id),
            )
