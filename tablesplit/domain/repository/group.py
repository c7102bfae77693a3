"""Group repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tablesplit.domain.model.group import Group
from tablesplit.domain.value import ExpenseId, GroupId, UserId


class GroupRepository(ABC):
    """Group directory: groups, their members and expense participants.

    Membership writes are idempotent: adding an existing member is a no-op.
    """

    @abstractmethod
    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID.

        Args:
            group_id: The group's unique identifier

        Returns:
            The group if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, group: Group) -> Group:
        """Save a group (create or update)."""
        pass

    @abstractmethod
    async def is_member(self, group_id: GroupId, user_id: UserId) -> bool:
        """Check whether a user belongs to a group."""
        pass

    @abstractmethod
    async def list_member_ids(self, group_id: GroupId) -> list[UserId]:
        """List the members of a group in join order."""
        pass

    @abstractmethod
    async def add_member(self, group_id: GroupId, user_id: UserId) -> bool:
        """Add a user to a group.

        Returns:
            True if the user was added, False if already a member
        """
        pass

    @abstractmethod
    async def add_expense_participant(
        self, expense_id: ExpenseId, user_id: UserId
    ) -> bool:
        """Add a user to an expense's participant set.

        Returns:
            True if the user was added, False if already a participant
        """
        pass

    @abstractmethod
    async def list_expense_participant_ids(self, expense_id: ExpenseId) -> list[UserId]:
        """List the participants of an expense."""
        pass
