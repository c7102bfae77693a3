"""In-memory repository implementations for testing."""

from .audit import InMemoryInviteAuditRepository
from .group import InMemoryGroupRepository
from .invite import InMemoryInviteRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryGroupRepository",
    "InMemoryInviteAuditRepository",
    "InMemoryInviteRepository",
    "InMemoryUserRepository",
]
