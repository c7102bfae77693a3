"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Any, Optional

from tablesplit.domain.error import ConflictError
from tablesplit.domain.model.invite import Invite
from tablesplit.domain.repository.invite import InviteRepository
from tablesplit.domain.value import (
    EmailAddress,
    GroupId,
    InviteId,
    InviteStatus,
    TokenFingerprint,
    UserId,
)


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing.

    No method awaits between reading and writing, so each call is atomic
    with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._invites: dict[InviteId, Invite] = {}
        self.commits = 0

    async def insert(self, invite: Invite) -> InviteId:
        """Insert a new invite.

        Raises:
            ConflictError: If the fingerprint or pending slot is taken
        """
        if invite.id in self._invites:
            raise ConflictError(f"Invite {invite.id} already exists")
        for existing in self._invites.values():
            if existing.token_fingerprint == invite.token_fingerprint:
                raise ConflictError("Duplicate token fingerprint")
            if (
                invite.status == InviteStatus.PENDING
                and existing.status == InviteStatus.PENDING
                and existing.email == invite.email
                and existing.group_id == invite.group_id
            ):
                raise ConflictError("Duplicate pending invite")
        self._invites[invite.id] = invite
        return invite.id

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        return self._invites.get(invite_id)

    async def find_by_fingerprint(
        self, fingerprint: TokenFingerprint
    ) -> Optional[Invite]:
        """Find an invite by token fingerprint."""
        for invite in self._invites.values():
            if invite.token_fingerprint == fingerprint:
                return invite
        return None

    async def find_pending_by_email_and_group(
        self, email: EmailAddress, group_id: GroupId
    ) -> Optional[Invite]:
        """Find the pending invite for an (email, group) pair."""
        for invite in self._invites.values():
            if (
                invite.email == email
                and invite.group_id == group_id
                and invite.status == InviteStatus.PENDING
            ):
                return invite
        return None

    async def update_status(
        self,
        invite_id: InviteId,
        expected_status: InviteStatus,
        new_status: InviteStatus,
        **fields: Any,
    ) -> Optional[Invite]:
        """Compare-and-swap the invite status."""
        invite = self._invites.get(invite_id)
        if invite is None or invite.status != expected_status:
            return None
        updated = invite.model_copy(update={"status": new_status, **fields})
        self._invites[invite_id] = updated
        return updated

    async def list_by_group_and_status(
        self,
        group_id: GroupId,
        status: Optional[InviteStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites for a group, newest first."""
        invites = [
            i
            for i in self._invites.values()
            if i.group_id == group_id and (status is None or i.status == status)
        ]
        invites.sort(key=lambda i: i.created_at, reverse=True)
        return invites[offset : offset + limit]

    async def list_by_inviter(
        self,
        inviter_id: UserId,
        status: Optional[InviteStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites sent by a user, newest first."""
        invites = [
            i
            for i in self._invites.values()
            if i.invited_by == inviter_id and (status is None or i.status == status)
        ]
        invites.sort(key=lambda i: i.created_at, reverse=True)
        return invites[offset : offset + limit]

    async def list_pending_by_email(self, email: EmailAddress) -> list[Invite]:
        """List pending invites for an email, oldest first."""
        invites = [
            i
            for i in self._invites.values()
            if i.email == email and i.status == InviteStatus.PENDING
        ]
        invites.sort(key=lambda i: i.created_at)
        return invites

    async def list_pending_expired(self, now: datetime, limit: int) -> list[Invite]:
        """List pending invites past their window."""
        invites = [
            i
            for i in self._invites.values()
            if i.status == InviteStatus.PENDING and i.expires_at < now
        ]
        invites.sort(key=lambda i: i.expires_at)
        return invites[:limit]

    async def count_by_inviter_since(self, inviter_id: UserId, since: datetime) -> int:
        """Count invites created by a user after ``since``."""
        return sum(
            1
            for i in self._invites.values()
            if i.invited_by == inviter_id and i.created_at > since
        )

    async def commit(self) -> None:
        self.commits += 1
