"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Any, Optional

import logfire
from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from tablesplit.domain.error import ConflictError, DependencyFailureError
from tablesplit.domain.model import Invite
from tablesplit.domain.repository import InviteRepository
from tablesplit.domain.value import (
    EmailAddress,
    GroupId,
    InviteId,
    InviteStatus,
    TokenFingerprint,
    UserId,
)
from tablesplit.persistence.mappers import invite_to_dict, row_to_invite
from tablesplit.persistence.repository.base import PostgresRepository
from tablesplit.persistence.tables import invites_table

# Columns update_status may write alongside the status
_UPDATABLE_FIELDS = frozenset({"accepted_at", "accepted_by"})


class PostgresInviteRepository(PostgresRepository, InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    async def insert(self, invite: Invite) -> InviteId:
        """Insert a new invite.

        Runs in a savepoint so a unique violation leaves the surrounding
        request transaction usable.

        Raises:
            ConflictError: If the fingerprint or the pending (email, group)
                slot is already taken
        """
        stmt = insert(invites_table).values(**invite_to_dict(invite))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn(
                "Invite insert violated a unique constraint",
                invite_id=str(invite.id),
                group_id=str(invite.group_id),
            )
            raise ConflictError(
                f"A pending invite already exists for {invite.email} "
                f"in group {invite.group_id}"
            ) from e
        except (SQLAlchemyError, OSError) as e:
            logfire.error("Invite insert failed", error=str(e))
            raise DependencyFailureError("Database unavailable") from e
        return invite.id

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_fingerprint(
        self, fingerprint: TokenFingerprint
    ) -> Optional[Invite]:
        """Find an invite by its token fingerprint.

        Direct hit on the unique fingerprint index.
        """
        stmt = select(invites_table).where(
            invites_table.c.token_fingerprint == fingerprint.root
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_pending_by_email_and_group(
        self, email: EmailAddress, group_id: GroupId
    ) -> Optional[Invite]:
        """Find the pending invite for an (email, group) pair."""
        stmt = select(invites_table).where(
            and_(
                invites_table.c.email == email.root,
                invites_table.c.group_id == group_id,
                invites_table.c.status == InviteStatus.PENDING.value,
            )
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def update_status(
        self,
        invite_id: InviteId,
        expected_status: InviteStatus,
        new_status: InviteStatus,
        **fields: Any,
    ) -> Optional[Invite]:
        """Compare-and-swap the status with a single conditional UPDATE.

        Concurrent writers on the same row serialize on its lock; the loser
        re-evaluates the WHERE clause and matches nothing.
        """
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update invite fields: {sorted(unknown)}")

        stmt = (
            update(invites_table)
            .where(
                and_(
                    invites_table.c.id == invite_id,
                    invites_table.c.status == expected_status.value,
                )
            )
            .values(status=new_status.value, **fields)
            .returning(*invites_table.c)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def list_by_group_and_status(
        self,
        group_id: GroupId,
        status: Optional[InviteStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites for a group, newest first."""
        stmt = (
            select(invites_table)
            .where(invites_table.c.group_id == group_id)
            .order_by(invites_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )

        if status:
            stmt = stmt.where(invites_table.c.status == status.value)

        result = await self._execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def list_by_inviter(
        self,
        inviter_id: UserId,
        status: Optional[InviteStatus] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites sent by a user, newest first."""
        stmt = (
            select(invites_table)
            .where(invites_table.c.invited_by == inviter_id)
            .order_by(invites_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )

        if status:
            stmt = stmt.where(invites_table.c.status == status.value)

        result = await self._execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def list_pending_by_email(self, email: EmailAddress) -> list[Invite]:
        """List pending invites for an email, oldest first."""
        stmt = (
            select(invites_table)
            .where(
                and_(
                    invites_table.c.email == email.root,
                    invites_table.c.status == InviteStatus.PENDING.value,
                )
            )
            .order_by(invites_table.c.created_at.asc())
        )
        result = await self._execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def list_pending_expired(self, now: datetime, limit: int) -> list[Invite]:
        """List pending invites past their window, oldest expiry first."""
        stmt = (
            select(invites_table)
            .where(
                and_(
                    invites_table.c.status == InviteStatus.PENDING.value,
                    invites_table.c.expires_at < now,
                )
            )
            .order_by(invites_table.c.expires_at.asc())
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings().all()]

    async def count_by_inviter_since(self, inviter_id: UserId, since: datetime) -> int:
        """Count invites created by a user after ``since``."""
        stmt = (
            select(func.count())
            .select_from(invites_table)
            .where(
                and_(
                    invites_table.c.invited_by == inviter_id,
                    invites_table.c.created_at > since,
                )
            )
        )
        result = await self._execute(stmt)
        return result.scalar() or 0

    async def commit(self) -> None:
        """Commit the request transaction so far; the session begins anew."""
        try:
            await self.session.commit()
        except (SQLAlchemyError, OSError) as e:
            logfire.error("Invite commit failed", error=str(e))
            raise DependencyFailureError("Database unavailable") from e
