"""Strongly typed identifiers for TableSplit domain entities.

Using NewType keeps group, expense, user and invite ids from being
mixed up at call sites.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
GroupId = NewType("GroupId", UUID)
ExpenseId = NewType("ExpenseId", UUID)
InviteId = NewType("InviteId", UUID)
AuditEntryId = NewType("AuditEntryId", UUID)
