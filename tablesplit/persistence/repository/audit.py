"""PostgreSQL implementation of the invite audit repository."""

from sqlalchemy import insert, select

from tablesplit.domain.model import InviteAuditEntry
from tablesplit.domain.repository import InviteAuditRepository
from tablesplit.domain.value import InviteId
from tablesplit.persistence.mappers import audit_entry_to_dict, row_to_audit_entry
from tablesplit.persistence.repository.base import PostgresRepository
from tablesplit.persistence.tables import invite_audit_log_table


class PostgresInviteAuditRepository(PostgresRepository, InviteAuditRepository):
    """Append-only audit log in PostgreSQL."""

    async def append(self, entry: InviteAuditEntry) -> InviteAuditEntry:
        """Append an entry in its own savepoint.

        A failed append leaves earlier writes in the transaction intact.
        """
        stmt = insert(invite_audit_log_table).values(**audit_entry_to_dict(entry))
        await self._execute_in_savepoint(stmt)
        return entry

    async def list_for_invite(self, invite_id: InviteId) -> list[InviteAuditEntry]:
        stmt = (
            select(invite_audit_log_table)
            .where(invite_audit_log_table.c.invite_id == invite_id)
            .order_by(invite_audit_log_table.c.created_at.desc())
        )
        result = await self._execute(stmt)
        return [row_to_audit_entry(dict(row)) for row in result.mappings().all()]
