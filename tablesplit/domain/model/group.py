"""Group directory entry.

Membership and expense participants are owned by the group directory
(see GroupRepository), not by this model.
"""

from datetime import datetime, timezone

from pydantic import Field

from tablesplit.domain.model.common import DomainModel
from tablesplit.domain.value import GroupId, UserId


class Group(DomainModel):
    """Expense-sharing group."""

    id: GroupId
    name: str = Field(min_length=1, max_length=100)
    created_by: UserId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
