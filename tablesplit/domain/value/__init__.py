"""Domain value objects for TableSplit."""

from tablesplit.domain.value.identifiers import (
    AuditEntryId,
    ExpenseId,
    GroupId,
    InviteId,
    UserId,
)
from tablesplit.domain.value.types import (
    AuditAction,
    EmailAddress,
    InviteStatus,
    TokenFingerprint,
)

__all__ = [
    # Identifiers
    "AuditEntryId",
    "ExpenseId",
    "GroupId",
    "InviteId",
    "UserId",
    # Types
    "AuditAction",
    "EmailAddress",
    "InviteStatus",
    "TokenFingerprint",
]
