"""PostgreSQL implementation of Group repository."""

from typing import Optional

from sqlalchemy import and_, select
from sqlalchemy.dialects.postgresql import insert

from tablesplit.domain.model import Group
from tablesplit.domain.repository import GroupRepository
from tablesplit.domain.value import ExpenseId, GroupId, UserId
from tablesplit.persistence.mappers import group_to_dict, row_to_group
from tablesplit.persistence.repository.base import PostgresRepository
from tablesplit.persistence.tables import (
    expense_participants_table,
    group_members_table,
    groups_table,
)


class PostgresGroupRepository(PostgresRepository, GroupRepository):
    """PostgreSQL implementation of GroupRepository.

    Membership inserts use ON CONFLICT DO NOTHING, so repeated adds are
    no-ops.
    """

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        stmt = select(groups_table).where(groups_table.c.id == group_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_group(dict(row)) if row else None

    async def save(self, group: Group) -> Group:
        values = group_to_dict(group)
        stmt = (
            insert(groups_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[groups_table.c.id], set_={"name": values["name"]}
            )
        )
        await self._execute(stmt)
        return group

    async def is_member(self, group_id: GroupId, user_id: UserId) -> bool:
        stmt = select(group_members_table.c.user_id).where(
            and_(
                group_members_table.c.group_id == group_id,
                group_members_table.c.user_id == user_id,
            )
        )
        result = await self._execute(stmt)
        return result.first() is not None

    async def list_member_ids(self, group_id: GroupId) -> list[UserId]:
        stmt = (
            select(group_members_table.c.user_id)
            .where(group_members_table.c.group_id == group_id)
            .order_by(group_members_table.c.joined_at.asc())
        )
        result = await self._execute(stmt)
        return [UserId(row.user_id) for row in result.all()]

    async def add_member(self, group_id: GroupId, user_id: UserId) -> bool:
        stmt = (
            insert(group_members_table)
            .values(group_id=group_id, user_id=user_id)
            .on_conflict_do_nothing(index_elements=["group_id", "user_id"])
            .returning(group_members_table.c.user_id)
        )
        result = await self._execute(stmt)
        return result.first() is not None

    async def add_expense_participant(
        self, expense_id: ExpenseId, user_id: UserId
    ) -> bool:
        stmt = (
            insert(expense_participants_table)
            .values(expense_id=expense_id, user_id=user_id)
            .on_conflict_do_nothing(index_elements=["expense_id", "user_id"])
            .returning(expense_participants_table.c.user_id)
        )
        result = await self._execute(stmt)
        return result.first() is not None

    async def list_expense_participant_ids(self, expense_id: ExpenseId) -> list[UserId]:
        stmt = (
            select(expense_participants_table.c.user_id)
            .where(expense_participants_table.c.expense_id == expense_id)
            .order_by(expense_participants_table.c.joined_at.asc())
        )
        result = await self._execute(stmt)
        return [UserId(row.user_id) for row in result.all()]
