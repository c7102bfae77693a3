"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert

from tablesplit.domain.model import User
from tablesplit.domain.repository import UserRepository
from tablesplit.domain.value import EmailAddress, UserId
from tablesplit.persistence.mappers import row_to_user, user_to_dict
from tablesplit.persistence.repository.base import PostgresRepository
from tablesplit.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find a user by normalized email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Upsert a user."""
        values = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={"email": values["email"], "name": values["name"]},
            )
        )
        await self._execute(stmt)
        return user
