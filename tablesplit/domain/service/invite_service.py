"""Invite lifecycle domain service.

Owns every status transition of an invite:

    pending -> accepted | expired | cancelled

All writes go through the repository's compare-and-swap, so the service
is safe to run from any number of processes at once.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any, Awaitable, TypeVar
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from tablesplit.config import InvitationSettings
from tablesplit.domain.error import (
    AlreadyAcceptedError,
    AlreadyRegisteredError,
    ConflictError,
    DependencyFailureError,
    InvalidTokenError,
    NotAuthorizedError,
    NotFoundError,
    RateLimitExceededError,
    TokenExpiredError,
    ValidationError,
)
from tablesplit.domain.model import INVITE_VALIDITY, Invite, InviteAuditEntry
from tablesplit.domain.model.common import DomainModel
from tablesplit.domain.repository import (
    GroupRepository,
    InviteAuditRepository,
    InviteRepository,
    UserRepository,
)
from tablesplit.domain.value import (
    AuditAction,
    AuditEntryId,
    EmailAddress,
    ExpenseId,
    GroupId,
    InviteId,
    InviteStatus,
    UserId,
)

from .base import Service
from .membership import MembershipApplier
from .notification import NotificationDispatcher, NotificationError
from .token_codec import TokenCodec

T = TypeVar("T")

# Supersede-then-insert attempts when concurrent creates collide
_ISSUE_ATTEMPTS = 3


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _redact(secret: object) -> str:
    """Log-safe prefix of a presented secret."""
    if not isinstance(secret, str):
        return "<invalid>"
    return secret[:8] + "..."


class IssuedInvite(DomainModel):
    """Result of issuing an invite.

    The secret is handed out exactly once, here. It is never stored.
    """

    invite: Invite
    secret: str
    notification_sent: bool


class InviteService(Service):
    """Domain service for the invite lifecycle."""

    def __init__(
        self,
        invite_repository: InviteRepository,
        audit_repository: InviteAuditRepository,
        user_repository: UserRepository,
        group_repository: GroupRepository,
        membership_applier: MembershipApplier,
        notification_dispatcher: NotificationDispatcher,
        token_codec: TokenCodec,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite store
            audit_repository: Audit trail store
            user_repository: User directory
            group_repository: Group directory
            membership_applier: Applies group/expense membership on accept
            notification_dispatcher: Sends invite emails
            token_codec: Secret generation and matching
            settings: Invitation settings
        """
        self.invite_repository = invite_repository
        self.audit_repository = audit_repository
        self.user_repository = user_repository
        self.group_repository = group_repository
        self.membership_applier = membership_applier
        self.notification_dispatcher = notification_dispatcher
        self.token_codec = token_codec
        self.settings = settings

    # ------------------------------------------------------------------
    # Issuance
    # ------------------------------------------------------------------

    async def create_invite(
        self,
        email: str | EmailAddress,
        invited_by: UserId,
        group_id: GroupId,
        expense_id: ExpenseId | None = None,
    ) -> IssuedInvite:
        """Create an invite and send it.

        Any pending invite for the same (email, group) is cancelled first.
        The invite is committed before the email is sent, so dispatch holds
        no row locks. A failed notification does not undo the invite; it is
        reported via ``notification_sent`` and the invite can be resent.

        Args:
            email: Invitee email, normalized here
            invited_by: User issuing the invite
            group_id: Group to join
            expense_id: Optional expense scope

        Returns:
            The issued invite with its one-time secret

        Raises:
            ValidationError: If the email is malformed
            NotFoundError: If the group or inviter does not exist
            NotAuthorizedError: If the inviter is not a group member
            AlreadyRegisteredError: If the email already has an account
            RateLimitExceededError: If the inviter hit the daily limit
            ConflictError: If concurrent creates kept colliding
            DependencyFailureError: If a store is unavailable
        """
        normalized = self._normalize_email(email)

        with logfire.span(
            "invite_service.create_invite",
            email=normalized.root,
            invited_by=str(invited_by),
            group_id=str(group_id),
            expense_id=str(expense_id) if expense_id else None,
        ):
            group = await self._bounded(
                self.group_repository.find_by_id(group_id), "group.find_by_id"
            )
            if not group:
                logfire.warn("Group not found for invite", group_id=str(group_id))
                raise NotFoundError("Group", str(group_id))

            inviter = await self._bounded(
                self.user_repository.find_by_id(invited_by), "user.find_by_id"
            )
            if not inviter:
                raise NotFoundError("User", str(invited_by))

            is_member = await self._bounded(
                self.group_repository.is_member(group_id, invited_by),
                "group.is_member",
            )
            if not is_member:
                logfire.warn(
                    "Inviter is not a group member",
                    invited_by=str(invited_by),
                    group_id=str(group_id),
                )
                raise NotAuthorizedError(
                    "invite to", "group", str(group_id), str(invited_by)
                )

            existing_user = await self._bounded(
                self.user_repository.find_by_email(normalized), "user.find_by_email"
            )
            if existing_user:
                logfire.info("Invitee already registered", email=normalized.root)
                raise AlreadyRegisteredError(normalized.root)

            await self._check_rate_limit(invited_by)

            invite, secret = await self._issue(
                normalized, invited_by, group_id, expense_id, performed_by=invited_by
            )
            await self._audit(invite.id, AuditAction.CREATED, invited_by)
            await self._bounded(self.invite_repository.commit(), "invite.commit")

            sent = await self._dispatch(invite, secret, inviter.name, group.name)
            return IssuedInvite(invite=invite, secret=secret, notification_sent=sent)

    async def resend_invite(
        self, invite_id: InviteId, requested_by: UserId
    ) -> IssuedInvite:
        """Replace a pending invite with a fresh one and send it.

        The old invite is cancelled; the new one gets a new secret and a new
        validity window, so fingerprints and expiry stay immutable.

        Args:
            invite_id: Pending invite to resend
            requested_by: Must be the original inviter

        Returns:
            The newly issued invite

        Raises:
            NotFoundError: If the invite, inviter or group is gone
            NotAuthorizedError: If requested_by is not the inviter
            ConflictError: If the invite is no longer pending
        """
        with logfire.span(
            "invite_service.resend_invite",
            invite_id=str(invite_id),
            requested_by=str(requested_by),
        ):
            invite = await self._get_owned_invite(invite_id, requested_by, "resend")

            inviter = await self._bounded(
                self.user_repository.find_by_id(invite.invited_by), "user.find_by_id"
            )
            if not inviter:
                raise NotFoundError("User", str(invite.invited_by))
            group = await self._bounded(
                self.group_repository.find_by_id(invite.group_id), "group.find_by_id"
            )
            if not group:
                raise NotFoundError("Group", str(invite.group_id))

            await self._cancel_pending(invite, requested_by, reason="resent")

            new_invite, secret = await self._issue(
                invite.email,
                invite.invited_by,
                invite.group_id,
                invite.expense_id,
                performed_by=requested_by,
            )
            await self._audit(
                new_invite.id,
                AuditAction.RESENT,
                requested_by,
                replaces=str(invite.id),
            )
            await self._bounded(self.invite_repository.commit(), "invite.commit")

            sent = await self._dispatch(new_invite, secret, inviter.name, group.name)
            logfire.info(
                "Invite resent",
                old_invite_id=str(invite.id),
                invite_id=str(new_invite.id),
                notification_sent=sent,
            )
            return IssuedInvite(invite=new_invite, secret=secret, notification_sent=sent)

    # ------------------------------------------------------------------
    # Verification and acceptance
    # ------------------------------------------------------------------

    async def verify_invite(self, secret: str) -> Invite:
        """Check an invite secret without consuming it.

        Args:
            secret: Secret from the invite link

        Returns:
            The pending invite (group, expense and inviter context)

        Raises:
            InvalidTokenError: If the secret is unknown, malformed, or its
                invite is no longer pending
            TokenExpiredError: If the invite's window has passed
        """
        with logfire.span("invite_service.verify_invite", token=_redact(secret)):
            invite = await self._load_valid(secret)
            logfire.info(
                "Invite verified",
                invite_id=str(invite.id),
                group_id=str(invite.group_id),
            )
            return invite

    async def accept_invite(self, secret: str, accepting_user_id: UserId) -> Invite:
        """Consume an invite and join its group.

        Membership is applied before the status swap: a repeated membership
        add is harmless, an accepted invite without membership is not.

        Args:
            secret: Secret from the invite link
            accepting_user_id: Registered user accepting the invite

        Returns:
            The accepted invite

        Raises:
            InvalidTokenError: See verify_invite; also for an email mismatch
            TokenExpiredError: If the invite's window has passed
            NotFoundError: If the accepting user does not exist
            AlreadyAcceptedError: If a concurrent accept won
            DependencyFailureError: If membership or the store failed; the
                invite stays pending
        """
        with logfire.span(
            "invite_service.accept_invite",
            token=_redact(secret),
            accepting_user_id=str(accepting_user_id),
        ):
            invite = await self._load_valid(secret)

            user = await self._bounded(
                self.user_repository.find_by_id(accepting_user_id), "user.find_by_id"
            )
            if not user:
                raise NotFoundError("User", str(accepting_user_id))

            if self.settings.require_matching_email and user.email != invite.email:
                logfire.warn(
                    "Invite email mismatch",
                    invite_id=str(invite.id),
                    accepting_user_id=str(accepting_user_id),
                )
                raise InvalidTokenError()

            return await self._accept(invite, user.id)

    async def claim_pending_invites(self, user_id: UserId) -> list[Invite]:
        """Accept every pending invite addressed to a newly registered user.

        Invites that fail are logged and skipped so one bad invite does not
        block the rest.

        Args:
            user_id: The registered user

        Returns:
            Invites accepted by this call
        """
        with logfire.span("invite_service.claim_pending_invites", user_id=str(user_id)):
            user = await self._bounded(
                self.user_repository.find_by_id(user_id), "user.find_by_id"
            )
            if not user:
                raise NotFoundError("User", str(user_id))

            pending = await self._bounded(
                self.invite_repository.list_pending_by_email(user.email),
                "invite.list_pending_by_email",
            )

            now = _now()
            accepted: list[Invite] = []
            for invite in pending:
                if invite.is_expired(now):
                    await self._expire(invite)
                    continue
                try:
                    accepted.append(await self._accept(invite, user.id))
                except (
                    ConflictError,
                    InvalidTokenError,
                    TokenExpiredError,
                    DependencyFailureError,
                ) as e:
                    logfire.error(
                        "Failed to claim invite",
                        invite_id=str(invite.id),
                        user_id=str(user_id),
                        kind=e.kind.value,
                        error=str(e),
                    )

            logfire.info(
                "Pending invites claimed",
                user_id=str(user_id),
                pending=len(pending),
                accepted=len(accepted),
            )
            return accepted

    # ------------------------------------------------------------------
    # Cancellation and expiry
    # ------------------------------------------------------------------

    async def cancel_invite(self, invite_id: InviteId, requested_by: UserId) -> Invite:
        """Cancel a pending invite.

        Args:
            invite_id: Invite to cancel
            requested_by: Must be the original inviter

        Returns:
            The cancelled invite

        Raises:
            NotFoundError: If the invite does not exist
            NotAuthorizedError: If requested_by is not the inviter
            ConflictError: If the invite is already terminal
        """
        with logfire.span(
            "invite_service.cancel_invite",
            invite_id=str(invite_id),
            requested_by=str(requested_by),
        ):
            invite = await self._get_owned_invite(invite_id, requested_by, "cancel")
            cancelled = await self._cancel_pending(invite, requested_by)
            logfire.info("Invite cancelled", invite_id=str(invite_id))
            return cancelled

    async def opt_out(self, email: str | EmailAddress) -> int:
        """Cancel every pending invite for an address at the invitee's request.

        Records are kept; only their status changes. Invites whose window
        has already passed are marked expired instead.

        Args:
            email: Invitee email

        Returns:
            Number of invites cancelled
        """
        normalized = self._normalize_email(email)

        with logfire.span("invite_service.opt_out", email=normalized.root):
            pending = await self._bounded(
                self.invite_repository.list_pending_by_email(normalized),
                "invite.list_pending_by_email",
            )
            now = _now()
            count = 0
            for invite in pending:
                if invite.is_expired(now):
                    await self._expire(invite)
                    continue
                cancelled = await self._bounded(
                    self.invite_repository.update_status(
                        invite.id, InviteStatus.PENDING, InviteStatus.CANCELLED
                    ),
                    "invite.update_status",
                )
                if cancelled is None:
                    continue
                count += 1
                await self._audit(invite.id, AuditAction.CANCELLED, reason="opt_out")

            logfire.info("Invitee opted out", email=normalized.root, cancelled=count)
            return count

    async def sweep_expired(self, batch_size: int | None = None) -> int:
        """Expire pending invites whose window has passed.

        Purely an optimization over the lazy expiry in verify/accept;
        running it twice is a no-op the second time.

        Args:
            batch_size: Maximum invites examined (defaults to settings)

        Returns:
            Number of invites transitioned to expired
        """
        limit = batch_size or self.settings.sweep_batch_size

        with logfire.span("invite_service.sweep_expired", batch_size=limit):
            candidates = await self._bounded(
                self.invite_repository.list_pending_expired(_now(), limit),
                "invite.list_pending_expired",
            )
            count = 0
            for invite in candidates:
                if await self._expire(invite):
                    count += 1

            logfire.info(
                "Expired invites swept", candidates=len(candidates), expired=count
            )
            return count

    # ------------------------------------------------------------------
    # Read paths
    # ------------------------------------------------------------------

    async def list_group_invites(
        self,
        group_id: GroupId,
        requested_by: UserId,
        status: InviteStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List a group's invites for one of its members.

        Raises:
            NotFoundError: If the group does not exist
            NotAuthorizedError: If requested_by is not a member
        """
        with logfire.span(
            "invite_service.list_group_invites",
            group_id=str(group_id),
            requested_by=str(requested_by),
            status=status.value if status else None,
        ):
            group = await self._bounded(
                self.group_repository.find_by_id(group_id), "group.find_by_id"
            )
            if not group:
                raise NotFoundError("Group", str(group_id))
            is_member = await self._bounded(
                self.group_repository.is_member(group_id, requested_by),
                "group.is_member",
            )
            if not is_member:
                raise NotAuthorizedError(
                    "view invites of", "group", str(group_id), str(requested_by)
                )

            invites = await self._bounded(
                self.invite_repository.list_by_group_and_status(
                    group_id, status, limit, offset
                ),
                "invite.list_by_group_and_status",
            )
            logfire.info(
                "Group invites listed", group_id=str(group_id), count=len(invites)
            )
            return invites

    async def list_sent_invites(
        self,
        inviter_id: UserId,
        status: InviteStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Invite]:
        """List invites created by a user."""
        with logfire.span(
            "invite_service.list_sent_invites",
            inviter_id=str(inviter_id),
            status=status.value if status else None,
        ):
            invites = await self._bounded(
                self.invite_repository.list_by_inviter(
                    inviter_id, status, limit, offset
                ),
                "invite.list_by_inviter",
            )
            logfire.info(
                "Sent invites listed", inviter_id=str(inviter_id), count=len(invites)
            )
            return invites

    async def get_audit_trail(
        self, invite_id: InviteId, requested_by: UserId
    ) -> list[InviteAuditEntry]:
        """Audit entries for an invite, newest first. Inviter only."""
        with logfire.span(
            "invite_service.get_audit_trail",
            invite_id=str(invite_id),
            requested_by=str(requested_by),
        ):
            invite = await self._bounded(
                self.invite_repository.find_by_id(invite_id), "invite.find_by_id"
            )
            if not invite:
                raise NotFoundError("Invite", str(invite_id))
            if invite.invited_by != requested_by:
                raise NotAuthorizedError(
                    "view audit trail of", "invite", str(invite_id), str(requested_by)
                )
            return await self._bounded(
                self.audit_repository.list_for_invite(invite_id),
                "audit.list_for_invite",
            )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _bounded(self, awaitable: Awaitable[T], operation: str) -> T:
        """Await a store or collaborator call under the store timeout."""
        try:
            return await asyncio.wait_for(
                awaitable, timeout=self.settings.store_timeout_seconds
            )
        except asyncio.TimeoutError as e:
            logfire.error(
                "Invite dependency timed out",
                operation=operation,
                timeout=self.settings.store_timeout_seconds,
            )
            raise DependencyFailureError(f"{operation} timed out") from e

    @staticmethod
    def _normalize_email(email: str | EmailAddress) -> EmailAddress:
        if isinstance(email, EmailAddress):
            return email
        try:
            return EmailAddress(email)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid email address: {email!r}") from e

    async def _check_rate_limit(self, inviter_id: UserId) -> None:
        limit = self.settings.rate_limit_per_day
        since = _now() - timedelta(hours=24)
        recent = await self._bounded(
            self.invite_repository.count_by_inviter_since(inviter_id, since),
            "invite.count_by_inviter_since",
        )
        if recent >= limit:
            logfire.warn(
                "Invite rate limit exceeded",
                inviter_id=str(inviter_id),
                recent=recent,
                limit=limit,
            )
            raise RateLimitExceededError(limit)

    async def _issue(
        self,
        email: EmailAddress,
        invited_by: UserId,
        group_id: GroupId,
        expense_id: ExpenseId | None,
        performed_by: UserId,
    ) -> tuple[Invite, str]:
        """Supersede any pending invite for (email, group) and insert a new one.

        A concurrent create can slip a pending invite in between supersede
        and insert; the insert then conflicts and the loop supersedes that
        one too, so the last create wins.
        """
        for attempt in range(1, _ISSUE_ATTEMPTS + 1):
            await self._supersede_pending(email, group_id, performed_by)

            secret, fingerprint = self.token_codec.generate()
            now = _now()
            invite = Invite(
                id=InviteId(uuid4()),
                email=email,
                invited_by=invited_by,
                group_id=group_id,
                expense_id=expense_id,
                token_fingerprint=fingerprint,
                status=InviteStatus.PENDING,
                created_at=now,
                expires_at=now + INVITE_VALIDITY,
            )
            try:
                await self._bounded(
                    self.invite_repository.insert(invite), "invite.insert"
                )
            except ConflictError as e:
                logfire.warn(
                    "Invite insert conflicted",
                    email=email.root,
                    group_id=str(group_id),
                    attempt=attempt,
                    error=str(e),
                )
                continue

            logfire.info(
                "Invite created",
                invite_id=str(invite.id),
                invited_by=str(invited_by),
                group_id=str(group_id),
                expires_at=invite.expires_at,
            )
            return invite, secret

        raise ConflictError(
            f"Could not issue invite for {email} in group {group_id} "
            f"after {_ISSUE_ATTEMPTS} attempts"
        )

    async def _supersede_pending(
        self, email: EmailAddress, group_id: GroupId, performed_by: UserId
    ) -> None:
        existing = await self._bounded(
            self.invite_repository.find_pending_by_email_and_group(email, group_id),
            "invite.find_pending_by_email_and_group",
        )
        if existing is None:
            return

        superseded = await self._bounded(
            self.invite_repository.update_status(
                existing.id, InviteStatus.PENDING, InviteStatus.CANCELLED
            ),
            "invite.update_status",
        )
        if superseded is None:
            # Another caller moved it out of pending first
            logfire.info("Previous invite already settled", invite_id=str(existing.id))
            return

        logfire.info(
            "Pending invite superseded",
            invite_id=str(existing.id),
            group_id=str(group_id),
        )
        await self._audit(
            existing.id, AuditAction.CANCELLED, performed_by, reason="superseded"
        )

    async def _get_owned_invite(
        self, invite_id: InviteId, requested_by: UserId, action: str
    ) -> Invite:
        invite = await self._bounded(
            self.invite_repository.find_by_id(invite_id), "invite.find_by_id"
        )
        if not invite:
            raise NotFoundError("Invite", str(invite_id))
        if invite.invited_by != requested_by:
            logfire.warn(
                "Invite action by non-inviter",
                action=action,
                invite_id=str(invite_id),
                requested_by=str(requested_by),
            )
            raise NotAuthorizedError(action, "invite", str(invite_id), str(requested_by))
        if invite.status != InviteStatus.PENDING:
            raise ConflictError(
                f"Invite {invite_id} is no longer pending ({invite.status.value})"
            )
        return invite

    async def _cancel_pending(
        self, invite: Invite, requested_by: UserId, **metadata: Any
    ) -> Invite:
        cancelled = await self._bounded(
            self.invite_repository.update_status(
                invite.id, InviteStatus.PENDING, InviteStatus.CANCELLED
            ),
            "invite.update_status",
        )
        if cancelled is None:
            raise ConflictError(f"Invite {invite.id} is no longer pending")
        await self._audit(invite.id, AuditAction.CANCELLED, requested_by, **metadata)
        return cancelled

    async def _load_valid(self, secret: str) -> Invite:
        """Resolve a secret to its pending, unexpired invite."""
        fingerprint = self.token_codec.fingerprint(secret)
        if fingerprint is None:
            logfire.warn("Malformed invite token")
            raise InvalidTokenError()

        invite = await self._bounded(
            self.invite_repository.find_by_fingerprint(fingerprint),
            "invite.find_by_fingerprint",
        )
        if invite is None or not self.token_codec.matches(
            secret, invite.token_fingerprint
        ):
            logfire.warn("Invite not found", token=_redact(secret))
            raise InvalidTokenError()

        if invite.status != InviteStatus.PENDING:
            logfire.info(
                "Invite no longer pending",
                invite_id=str(invite.id),
                status=invite.status.value,
            )
            raise InvalidTokenError()

        if invite.is_expired(_now()):
            await self._expire(invite)
            raise TokenExpiredError()

        return invite

    async def _accept(self, invite: Invite, user_id: UserId) -> Invite:
        await self._bounded(
            self.membership_applier.add_member(invite.group_id, user_id),
            "membership.add_member",
        )
        if invite.expense_id is not None:
            await self._bounded(
                self.membership_applier.add_expense_participant(
                    invite.expense_id, user_id
                ),
                "membership.add_expense_participant",
            )

        accepted = await self._bounded(
            self.invite_repository.update_status(
                invite.id,
                InviteStatus.PENDING,
                InviteStatus.ACCEPTED,
                accepted_at=_now(),
                accepted_by=user_id,
            ),
            "invite.update_status",
        )
        if accepted is None:
            current = await self._bounded(
                self.invite_repository.find_by_id(invite.id), "invite.find_by_id"
            )
            status = current.status if current else None
            logfire.warn(
                "Lost invite accept race",
                invite_id=str(invite.id),
                user_id=str(user_id),
                status=status.value if status else None,
            )
            if status == InviteStatus.ACCEPTED:
                raise AlreadyAcceptedError(str(invite.id))
            if status == InviteStatus.EXPIRED:
                raise TokenExpiredError()
            raise InvalidTokenError()

        logfire.info(
            "Invite accepted",
            invite_id=str(invite.id),
            group_id=str(invite.group_id),
            user_id=str(user_id),
        )
        await self._audit(invite.id, AuditAction.ACCEPTED, user_id)
        return accepted

    async def _expire(self, invite: Invite) -> bool:
        expired = await self._bounded(
            self.invite_repository.update_status(
                invite.id, InviteStatus.PENDING, InviteStatus.EXPIRED
            ),
            "invite.update_status",
        )
        if expired is None:
            return False
        logfire.info("Invite expired", invite_id=str(invite.id))
        await self._audit(invite.id, AuditAction.EXPIRED)
        return True

    async def _dispatch(
        self, invite: Invite, secret: str, inviter_name: str, group_name: str
    ) -> bool:
        """Send the invite email; failures are logged, never raised."""
        try:
            await asyncio.wait_for(
                self.notification_dispatcher.send_invite(
                    invite.email,
                    invite.group_id,
                    secret,
                    inviter_name,
                    group_name=group_name,
                    expense_id=invite.expense_id,
                ),
                timeout=self.settings.notification_timeout_seconds,
            )
        except (NotificationError, asyncio.TimeoutError) as e:
            logfire.error(
                "Failed to send invite email",
                invite_id=str(invite.id),
                email=invite.email.root,
                error=str(e) or type(e).__name__,
            )
            return False

        await self._audit(invite.id, AuditAction.SENT)
        return True

    async def _audit(
        self,
        invite_id: InviteId,
        action: AuditAction,
        performed_by: UserId | None = None,
        **metadata: Any,
    ) -> None:
        """Append an audit entry; a failed append never undoes a transition."""
        entry = InviteAuditEntry(
            id=AuditEntryId(uuid4()),
            invite_id=invite_id,
            action=action,
            performed_by=performed_by,
            metadata=metadata,
            created_at=_now(),
        )
        try:
            await self._bounded(self.audit_repository.append(entry), "audit.append")
        except DependencyFailureError as e:
            logfire.warn(
                "Audit entry not recorded",
                invite_id=str(invite_id),
                action=action.value,
                error=str(e),
            )
