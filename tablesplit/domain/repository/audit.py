"""Invite audit repository interface."""

from abc import ABC, abstractmethod

from tablesplit.domain.model.audit import InviteAuditEntry
from tablesplit.domain.value import InviteId


class InviteAuditRepository(ABC):
    """Append-only store for invite lifecycle events."""

    @abstractmethod
    async def append(self, entry: InviteAuditEntry) -> InviteAuditEntry:
        """Record an audit entry."""
        pass

    @abstractmethod
    async def list_for_invite(self, invite_id: InviteId) -> list[InviteAuditEntry]:
        """List audit entries for an invite, newest first."""
        pass
