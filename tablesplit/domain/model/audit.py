"""Invite audit trail entry."""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import Field

from tablesplit.domain.model.common import DomainModel
from tablesplit.domain.value import AuditAction, AuditEntryId, InviteId, UserId


class InviteAuditEntry(DomainModel):
    """Append-only record of one invite lifecycle event."""

    id: AuditEntryId
    invite_id: InviteId
    action: AuditAction
    performed_by: Optional[UserId] = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
