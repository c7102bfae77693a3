"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tablesplit.domain.error import DependencyFailureError


class PostgresRepository:
    """Base for PostgreSQL repositories.

    Driver and connectivity failures surface as DependencyFailureError so
    the domain never sees SQLAlchemy exceptions.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Any) -> Result[Any]:
        try:
            return await self.session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            logfire.error(
                "Database statement failed",
                repository=type(self).__name__,
                error=str(e),
            )
            raise DependencyFailureError("Database unavailable") from e

    async def _execute_in_savepoint(self, stmt: Any) -> Result[Any]:
        """Execute a statement inside a savepoint.

        A failed statement rolls back to the savepoint, so the request
        transaction stays usable for the caller's later statements.
        """
        try:
            async with self.session.begin_nested():
                return await self.session.execute(stmt)
        except (SQLAlchemyError, OSError) as e:
            logfire.error(
                "Database statement failed inside savepoint",
                repository=type(self).__name__,
                error=str(e),
            )
            raise DependencyFailureError("Database unavailable") from e
