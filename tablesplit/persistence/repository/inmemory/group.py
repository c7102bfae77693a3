"""In-memory group repository for testing."""

from typing import Optional

from tablesplit.domain.model.group import Group
from tablesplit.domain.repository.group import GroupRepository
from tablesplit.domain.value import ExpenseId, GroupId, UserId


class InMemoryGroupRepository(GroupRepository):
    """In-memory implementation of GroupRepository for testing."""

    def __init__(self) -> None:
        self._groups: dict[GroupId, Group] = {}
        self._members: dict[GroupId, list[UserId]] = {}
        self._participants: dict[ExpenseId, list[UserId]] = {}

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        return self._groups.get(group_id)

    async def save(self, group: Group) -> Group:
        self._groups[group.id] = group
        self._members.setdefault(group.id, [])
        return group

    async def is_member(self, group_id: GroupId, user_id: UserId) -> bool:
        return user_id in self._members.get(group_id, [])

    async def list_member_ids(self, group_id: GroupId) -> list[UserId]:
        return list(self._members.get(group_id, []))

    async def add_member(self, group_id: GroupId, user_id: UserId) -> bool:
        members = self._members.setdefault(group_id, [])
        if user_id in members:
            return False
        members.append(user_id)
        return True

    async def add_expense_participant(
        self, expense_id: ExpenseId, user_id: UserId
    ) -> bool:
        participants = self._participants.setdefault(expense_id, [])
        if user_id in participants:
            return False
        participants.append(user_id)
        return True

    async def list_expense_participant_ids(self, expense_id: ExpenseId) -> list[UserId]:
        return list(self._participants.get(expense_id, []))
