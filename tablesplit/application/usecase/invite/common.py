"""Shared invite response models."""

from datetime import datetime
from typing import TypeVar

from pydantic import BaseModel

from tablesplit.domain.error import DomainError, InviteErrorKind
from tablesplit.domain.model import Invite
from tablesplit.domain.value import InviteStatus


class InviteItem(BaseModel):
    """Public view of an invite. Never carries the secret or fingerprint."""

    invite_id: str
    email: str
    invited_by: str
    group_id: str
    expense_id: str | None = None
    status: InviteStatus
    created_at: datetime
    expires_at: datetime
    accepted_at: datetime | None = None
    accepted_by: str | None = None

    @classmethod
    def from_invite(cls, invite: Invite) -> "InviteItem":
        return cls(
            invite_id=str(invite.id),
            email=invite.email.root,
            invited_by=str(invite.invited_by),
            group_id=str(invite.group_id),
            expense_id=str(invite.expense_id) if invite.expense_id else None,
            status=invite.status,
            created_at=invite.created_at,
            expires_at=invite.expires_at,
            accepted_at=invite.accepted_at,
            accepted_by=str(invite.accepted_by) if invite.accepted_by else None,
        )


class InviteResult(BaseModel):
    """Outcome envelope shared by invite responses."""

    ok: bool = True
    error: InviteErrorKind | None = None
    message: str | None = None


R = TypeVar("R", bound=InviteResult)


def failure(response_cls: type[R], error: DomainError) -> R:
    """Build a failed response from a domain error."""
    return response_cls(ok=False, error=error.kind, message=str(error))
