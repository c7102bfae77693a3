"""In-memory invite audit repository for testing."""

from tablesplit.domain.model.audit import InviteAuditEntry
from tablesplit.domain.repository.audit import InviteAuditRepository
from tablesplit.domain.value import InviteId


class InMemoryInviteAuditRepository(InviteAuditRepository):
    """In-memory implementation of InviteAuditRepository for testing."""

    def __init__(self) -> None:
        self._entries: list[InviteAuditEntry] = []

    async def append(self, entry: InviteAuditEntry) -> InviteAuditEntry:
        self._entries.append(entry)
        return entry

    async def list_for_invite(self, invite_id: InviteId) -> list[InviteAuditEntry]:
        # Insertion order breaks created_at ties
        entries = [e for e in self._entries if e.invite_id == invite_id]
        return list(reversed(entries))
