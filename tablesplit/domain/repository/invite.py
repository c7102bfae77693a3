"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from tablesplit.domain.model.invite import Invite
from tablesplit.domain.value import (
    EmailAddress,
    GroupId,
    InviteId,
    InviteStatus,
    TokenFingerprint,
    UserId,
)


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations. Status changes
    only happen through update_status, a compare-and-swap that is safe
    across processes. Implementations live in the persistence layer.

    Technical failures (connectivity, driver errors) are raised as
    DependencyFailureError.
    """

    @abstractmethod
    async def insert(self, invite: Invite) -> InviteId:
        """Persist a new invite.

        Args:
            invite: The invite to insert

        Returns:
            The invite's ID

        Raises:
            ConflictError: If the fingerprint is taken or a pending invite
                already exists for the same (email, group)
        """
        pass

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_fingerprint(self, fingerprint: TokenFingerprint) -> Invite | None:
        """Find an invite by the fingerprint of its secret.

        Used when someone opens an invite link.

        Args:
            fingerprint: Token fingerprint

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending_by_email_and_group(
        self, email: EmailAddress, group_id: GroupId
    ) -> Invite | None:
        """Find the pending invite for an (email, group) pair.

        Args:
            email: Normalized invitee email
            group_id: Target group

        Returns:
            The pending invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_status(
        self,
        invite_id: InviteId,
        expected_status: InviteStatus,
        new_status: InviteStatus,
        **fields: Any,
    ) -> Invite | None:
        """Compare-and-swap the invite status.

        The update applies only if the stored status still equals
        ``expected_status``; extra fields (accepted_at, accepted_by) are
        written atomically with the status.

        Args:
            invite_id: Invite to update
            expected_status: Status the caller observed
            new_status: Status to write
            **fields: Additional columns to set with the status

        Returns:
            The updated invite, or None if the swap lost (status changed or
            invite unknown)
        """
        pass

    @abstractmethod
    async def list_by_group_and_status(
        self,
        group_id: GroupId,
        status: InviteStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites for a group, newest first.

        Args:
            group_id: Target group
            status: Optional status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def list_by_inviter(
        self,
        inviter_id: UserId,
        status: InviteStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites sent by a user, newest first.

        Args:
            inviter_id: The inviter's ID
            status: Optional status filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invites
        """
        pass

    @abstractmethod
    async def list_pending_by_email(self, email: EmailAddress) -> list[Invite]:
        """List all pending invites addressed to an email.

        Args:
            email: Normalized invitee email

        Returns:
            Pending invites, oldest first
        """
        pass

    @abstractmethod
    async def list_pending_expired(self, now: datetime, limit: int) -> list[Invite]:
        """List pending invites whose validity window ended before ``now``.

        Args:
            now: Reference time
            limit: Maximum number of results

        Returns:
            Pending invites with expires_at < now
        """
        pass

    @abstractmethod
    async def count_by_inviter_since(self, inviter_id: UserId, since: datetime) -> int:
        """Count invites created by a user since a point in time.

        Used for rate limiting.

        Args:
            inviter_id: The inviter's ID
            since: Lower bound on created_at (exclusive)

        Returns:
            Number of invites
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes of the current unit of work durable.

        Releases row locks taken by earlier writes. Later writes start a new
        unit of work.
        """
        pass
