"""User directory entry.

Registration and login live outside this service; invites only need to
look users up by id or email.
"""

from datetime import datetime, timezone

from pydantic import Field

from tablesplit.domain.model.common import DomainModel
from tablesplit.domain.value import EmailAddress, UserId


class User(DomainModel):
    """Registered user."""

    id: UserId
    email: EmailAddress
    name: str = Field(min_length=1, max_length=100)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
