"""Repository interfaces for the TableSplit domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tablesplit.domain.repository.audit import InviteAuditRepository
from tablesplit.domain.repository.group import GroupRepository
from tablesplit.domain.repository.invite import InviteRepository
from tablesplit.domain.repository.user import UserRepository

__all__ = [
    "GroupRepository",
    "InviteAuditRepository",
    "InviteRepository",
    "UserRepository",
]
