"""Invite entity.

Invites bridge "invited" to "member": an unregistered person receives a
one-time link that lets them join a group, optionally scoped to one
expense in that group.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import model_validator

from tablesplit.domain.model.common import DomainModel
from tablesplit.domain.value import (
    EmailAddress,
    ExpenseId,
    GroupId,
    InviteId,
    InviteStatus,
    TokenFingerprint,
    UserId,
)

# Fixed validity window; expires_at is never recomputed.
INVITE_VALIDITY = timedelta(days=7)


class Invite(DomainModel):
    """Invite entity - one email, one group.

    Business rules:
    - At most one pending invite per (email, group)
    - Only the fingerprint of the secret is stored, never the secret
    - Invites expire 7 days after creation
    - Status only ever leaves PENDING; terminal records are kept for audit
    - accepted_at / accepted_by are set iff status is ACCEPTED
    """

    id: InviteId
    email: EmailAddress
    invited_by: UserId
    group_id: GroupId
    expense_id: Optional[ExpenseId] = None
    token_fingerprint: TokenFingerprint
    status: InviteStatus = InviteStatus.PENDING
    created_at: datetime
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[UserId] = None

    @model_validator(mode="after")
    def check_invariants(self) -> "Invite":
        """Validate acceptance fields and the validity window."""
        accepted = self.status == InviteStatus.ACCEPTED
        if accepted != (self.accepted_at is not None) or accepted != (
            self.accepted_by is not None
        ):
            raise ValueError(
                "accepted_at and accepted_by must be set iff status is accepted"
            )
        if self.expires_at - self.created_at != INVITE_VALIDITY:
            raise ValueError("expires_at must be created_at plus the validity window")
        return self

    def is_expired(self, now: datetime) -> bool:
        """Whether the validity window has passed at ``now``."""
        return now > self.expires_at
