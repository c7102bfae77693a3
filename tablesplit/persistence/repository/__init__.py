"""PostgreSQL repository implementations."""

from tablesplit.persistence.repository.audit import PostgresInviteAuditRepository
from tablesplit.persistence.repository.group import PostgresGroupRepository
from tablesplit.persistence.repository.invite import PostgresInviteRepository
from tablesplit.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresGroupRepository",
    "PostgresInviteAuditRepository",
    "PostgresInviteRepository",
    "PostgresUserRepository",
]
