"""Unit tests for the in-memory invite repository contract."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from tablesplit.domain.error import ConflictError
from tablesplit.domain.model import INVITE_VALIDITY, Invite
from tablesplit.domain.service import TokenCodec
from tablesplit.domain.value import (
    EmailAddress,
    GroupId,
    InviteId,
    InviteStatus,
    UserId,
)
from tablesplit.persistence.repository.inmemory import InMemoryInviteRepository

codec = TokenCodec("test-key")


def make_invite(
    email: str = "a@x.com",
    group_id: GroupId | None = None,
    status: InviteStatus = InviteStatus.PENDING,
    created_at: datetime | None = None,
) -> Invite:
    created = created_at or datetime.now(timezone.utc)
    _, fingerprint = codec.generate()
    return Invite(
        id=InviteId(uuid4()),
        email=EmailAddress(email),
        invited_by=UserId(uuid4()),
        group_id=group_id or GroupId(uuid4()),
        token_fingerprint=fingerprint,
        status=status,
        created_at=created,
        expires_at=created + INVITE_VALIDITY,
    )


class TestInsert:
    """Tests for uniqueness on insert."""

    @pytest.mark.asyncio
    async def test_second_pending_for_same_pair_conflicts(self):
        repo = InMemoryInviteRepository()
        group_id = GroupId(uuid4())
        await repo.insert(make_invite(group_id=group_id))

        with pytest.raises(ConflictError):
            await repo.insert(make_invite(group_id=group_id))

    @pytest.mark.asyncio
    async def test_terminal_invite_does_not_block_new_pending(self):
        repo = InMemoryInviteRepository()
        group_id = GroupId(uuid4())
        await repo.insert(make_invite(group_id=group_id, status=InviteStatus.CANCELLED))

        await repo.insert(make_invite(group_id=group_id))

        assert await repo.find_pending_by_email_and_group(
            EmailAddress("a@x.com"), group_id
        )

    @pytest.mark.asyncio
    async def test_duplicate_fingerprint_conflicts(self):
        repo = InMemoryInviteRepository()
        first = make_invite()
        await repo.insert(first)
        clash = make_invite(email="b@x.com").model_copy(
            update={"token_fingerprint": first.token_fingerprint}
        )

        with pytest.raises(ConflictError):
            await repo.insert(clash)


class TestUpdateStatus:
    """Tests for the compare-and-swap."""

    @pytest.mark.asyncio
    async def test_swap_from_expected_status(self):
        repo = InMemoryInviteRepository()
        invite = make_invite()
        await repo.insert(invite)

        updated = await repo.update_status(
            invite.id, InviteStatus.PENDING, InviteStatus.CANCELLED
        )

        assert updated.status == InviteStatus.CANCELLED
        assert (await repo.find_by_id(invite.id)).status == InviteStatus.CANCELLED

    @pytest.mark.asyncio
    async def test_swap_from_wrong_status_returns_none(self):
        """A lost swap changes nothing."""
        repo = InMemoryInviteRepository()
        invite = make_invite()
        await repo.insert(invite)
        await repo.update_status(invite.id, InviteStatus.PENDING, InviteStatus.EXPIRED)

        result = await repo.update_status(
            invite.id, InviteStatus.PENDING, InviteStatus.CANCELLED
        )

        assert result is None
        assert (await repo.find_by_id(invite.id)).status == InviteStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_swap_unknown_invite_returns_none(self):
        repo = InMemoryInviteRepository()

        assert (
            await repo.update_status(
                InviteId(uuid4()), InviteStatus.PENDING, InviteStatus.CANCELLED
            )
            is None
        )


class TestQueries:
    """Tests for list and count queries."""

    @pytest.mark.asyncio
    async def test_list_pending_expired(self):
        repo = InMemoryInviteRepository()
        now = datetime.now(timezone.utc)
        stale = make_invite(email="old@x.com", created_at=now - timedelta(days=8))
        fresh = make_invite(email="new@x.com", created_at=now)
        await repo.insert(stale)
        await repo.insert(fresh)

        result = await repo.list_pending_expired(now, limit=10)

        assert [i.id for i in result] == [stale.id]

    @pytest.mark.asyncio
    async def test_count_by_inviter_since(self):
        repo = InMemoryInviteRepository()
        now = datetime.now(timezone.utc)
        recent = make_invite(created_at=now - timedelta(hours=1))
        old = make_invite(email="b@x.com", created_at=now - timedelta(days=2)).model_copy(
            update={"invited_by": recent.invited_by}
        )
        await repo.insert(recent)
        await repo.insert(old)

        count = await repo.count_by_inviter_since(
            recent.invited_by, now - timedelta(hours=24)
        )

        assert count == 1
