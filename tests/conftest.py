"""Test configuration and shared builders."""

from datetime import datetime, timezone
from uuid import uuid4

from dishka import AsyncContainer

from tablesplit.domain.model import INVITE_VALIDITY, Group, Invite, User
from tablesplit.domain.repository import (
    GroupRepository,
    InviteRepository,
    UserRepository,
)
from tablesplit.domain.service import TokenCodec
from tablesplit.domain.value import (
    EmailAddress,
    ExpenseId,
    GroupId,
    InviteId,
    InviteStatus,
    UserId,
)


def make_user(email: str, name: str = "Test User") -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), email=EmailAddress(email), name=name)


async def seed_group(
    env: AsyncContainer,
    owner_email: str = "owner@example.com",
    group_name: str = "Lisbon Trip",
) -> tuple[User, Group]:
    """Create a user and a group they belong to."""
    users = await env.get(UserRepository)
    groups = await env.get(GroupRepository)

    owner = await users.save(make_user(owner_email, "Olivia Owner"))
    group = await groups.save(
        Group(id=GroupId(uuid4()), name=group_name, created_by=owner.id)
    )
    await groups.add_member(group.id, owner.id)
    return owner, group


async def register(env: AsyncContainer, email: str, name: str = "New Member") -> User:
    """Register a user, as signup would after an invite was sent."""
    users = await env.get(UserRepository)
    return await users.save(make_user(email, name))


async def insert_invite(
    env: AsyncContainer,
    *,
    email: str,
    invited_by: UserId,
    group_id: GroupId,
    created_at: datetime,
    expense_id: ExpenseId | None = None,
) -> tuple[Invite, str]:
    """Insert a pending invite directly, e.g. one created in the past.

    Returns:
        Tuple of (invite, secret)
    """
    codec = await env.get(TokenCodec)
    invites = await env.get(InviteRepository)

    secret, fingerprint = codec.generate()
    invite = Invite(
        id=InviteId(uuid4()),
        email=EmailAddress(email),
        invited_by=invited_by,
        group_id=group_id,
        expense_id=expense_id,
        token_fingerprint=fingerprint,
        status=InviteStatus.PENDING,
        created_at=created_at,
        expires_at=created_at + INVITE_VALIDITY,
    )
    await invites.insert(invite)
    return invite, secret


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
