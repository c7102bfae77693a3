"""Tests for invite use cases."""

from datetime import timedelta
from uuid import uuid4

import pytest

from tablesplit.adapter.email import MockNotificationDispatcher
from tablesplit.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteUseCase,
    CancelInviteRequest,
    CancelInviteUseCase,
    ClaimInvitesRequest,
    ClaimInvitesUseCase,
    CreateInviteRequest,
    CreateInviteUseCase,
    GetAuditTrailRequest,
    GetAuditTrailUseCase,
    ListGroupInvitesRequest,
    ListGroupInvitesUseCase,
    ListSentInvitesRequest,
    ListSentInvitesUseCase,
    OptOutRequest,
    OptOutUseCase,
    ResendInviteRequest,
    ResendInviteUseCase,
    SweepExpiredInvitesUseCase,
    SweepExpiredRequest,
    VerifyInviteRequest,
    VerifyInviteUseCase,
)
from tablesplit.domain.error import InviteErrorKind
from tablesplit.domain.value import AuditAction, InviteStatus
from tests.conftest import insert_invite, register, seed_group, utcnow
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create(env, owner, group, email: str = "a@x.com"):
    use_case = await env.get(CreateInviteUseCase)
    return await use_case.execute(
        CreateInviteRequest(inviter_id=str(owner.id), email=email, group_id=group.id)
    )


class TestCreateInviteUseCase:
    """Tests for CreateInviteUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_invite_without_secret(self, unit_env):
        """The response describes the invite but never carries its secret."""
        # Arrange
        owner, group = await seed_group(unit_env)
        dispatcher = await unit_env.get(MockNotificationDispatcher)

        # Act
        response = await create(unit_env, owner, group)

        # Assert
        assert response.ok
        assert response.notification_sent is True
        assert response.invite.status == InviteStatus.PENDING
        assert response.invite.group_id == str(group.id)
        dumped = response.model_dump_json()
        assert dispatcher.last_secret not in dumped
        assert "fingerprint" not in dumped

    @pytest.mark.asyncio
    async def test_create_reports_failed_email(self, unit_env):
        # Arrange
        owner, group = await seed_group(unit_env)
        dispatcher = await unit_env.get(MockNotificationDispatcher)
        dispatcher.fail = True

        # Act
        response = await create(unit_env, owner, group)

        # Assert
        assert response.ok
        assert response.notification_sent is False
        assert "could not be sent" in response.message

    @pytest.mark.asyncio
    async def test_create_for_registered_user_fails(self, unit_env):
        # Arrange
        owner, group = await seed_group(unit_env)
        await register(unit_env, "a@x.com")

        # Act
        response = await create(unit_env, owner, group)

        # Assert
        assert not response.ok
        assert response.error == InviteErrorKind.ALREADY_REGISTERED
        assert response.invite is None

    @pytest.mark.asyncio
    async def test_create_with_bad_email_fails(self, unit_env):
        owner, group = await seed_group(unit_env)

        response = await create(unit_env, owner, group, email="nope")

        assert response.error == InviteErrorKind.INVALID_REQUEST


class TestVerifyAndAcceptUseCases:
    """Tests for VerifyInviteUseCase and AcceptInviteUseCase."""

    @pytest.mark.asyncio
    async def test_verify_returns_join_context(self, unit_env):
        """Verify gives the join page the group and inviter names."""
        # Arrange
        owner, group = await seed_group(unit_env)
        await create(unit_env, owner, group)
        dispatcher = await unit_env.get(MockNotificationDispatcher)
        use_case = await unit_env.get(VerifyInviteUseCase)

        # Act
        response = await use_case.execute(
            VerifyInviteRequest(token=dispatcher.last_secret)
        )

        # Assert
        assert response.ok
        assert response.group_id == str(group.id)
        assert response.group_name == "Lisbon Trip"
        assert response.inviter_name == "Olivia Owner"
        assert response.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_verify_expired_reports_expiry(self, unit_env):
        # Arrange
        owner, group = await seed_group(unit_env)
        _, secret = await insert_invite(
            unit_env,
            email="a@x.com",
            invited_by=owner.id,
            group_id=group.id,
            created_at=utcnow() - timedelta(days=8),
        )
        use_case = await unit_env.get(VerifyInviteUseCase)

        # Act
        response = await use_case.execute(VerifyInviteRequest(token=secret))

        # Assert
        assert not response.ok
        assert response.error == InviteErrorKind.TOKEN_EXPIRED
        assert response.group_id is None

    @pytest.mark.asyncio
    async def test_accept_then_reaccept(self, unit_env):
        """A link works once; afterwards it reads as invalid."""
        # Arrange
        owner, group = await seed_group(unit_env)
        await create(unit_env, owner, group)
        dispatcher = await unit_env.get(MockNotificationDispatcher)
        user = await register(unit_env, "a@x.com")
        use_case = await unit_env.get(AcceptInviteUseCase)
        request = AcceptInviteRequest(token=dispatcher.last_secret, user_id=str(user.id))

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.ok
        assert first.group_id == str(group.id)
        assert first.invite.accepted_by == str(user.id)
        assert not second.ok
        assert second.error == InviteErrorKind.INVALID_TOKEN


class TestManagementUseCases:
    """Tests for cancel, resend, list, audit, opt-out, claim and sweep."""

    @pytest.mark.asyncio
    async def test_cancel_by_non_inviter_fails(self, unit_env):
        # Arrange
        owner, group = await seed_group(unit_env)
        created = await create(unit_env, owner, group)
        other = await register(unit_env, "other@x.com")
        use_case = await unit_env.get(CancelInviteUseCase)

        # Act
        response = await use_case.execute(
            CancelInviteRequest(invite_id=created.invite.invite_id, user_id=str(other.id))
        )

        # Assert
        assert response.error == InviteErrorKind.NOT_AUTHORIZED

    @pytest.mark.asyncio
    async def test_resend_returns_replacement(self, unit_env):
        # Arrange
        owner, group = await seed_group(unit_env)
        created = await create(unit_env, owner, group)
        use_case = await unit_env.get(ResendInviteUseCase)

        # Act
        response = await use_case.execute(
            ResendInviteRequest(invite_id=created.invite.invite_id, user_id=str(owner.id))
        )

        # Assert
        assert response.ok
        assert response.replaced_invite_id == created.invite.invite_id
        assert response.invite.invite_id != created.invite.invite_id
        assert response.notification_sent is True

    @pytest.mark.asyncio
    async def test_list_group_and_sent(self, unit_env):
        # Arrange
        owner, group = await seed_group(unit_env)
        await create(unit_env, owner, group, "a@x.com")
        await create(unit_env, owner, group, "b@x.com")
        group_use_case = await unit_env.get(ListGroupInvitesUseCase)
        sent_use_case = await unit_env.get(ListSentInvitesUseCase)

        # Act
        by_group = await group_use_case.execute(
            ListGroupInvitesRequest(group_id=group.id, user_id=str(owner.id), limit=1)
        )
        sent = await sent_use_case.execute(ListSentInvitesRequest(user_id=str(owner.id)))

        # Assert
        assert len(by_group.invites) == 1
        assert {i.email for i in sent.invites} == {"a@x.com", "b@x.com"}

    @pytest.mark.asyncio
    async def test_audit_trail(self, unit_env):
        # Arrange
        owner, group = await seed_group(unit_env)
        created = await create(unit_env, owner, group)
        use_case = await unit_env.get(GetAuditTrailUseCase)

        # Act
        response = await use_case.execute(
            GetAuditTrailRequest(invite_id=created.invite.invite_id, user_id=str(owner.id))
        )

        # Assert
        assert [e.action for e in response.entries] == [
            AuditAction.SENT,
            AuditAction.CREATED,
        ]

    @pytest.mark.asyncio
    async def test_opt_out(self, unit_env):
        owner, group = await seed_group(unit_env)
        await create(unit_env, owner, group)
        use_case = await unit_env.get(OptOutUseCase)

        response = await use_case.execute(OptOutRequest(email="A@X.com"))

        assert response.ok
        assert response.cancelled == 1

    @pytest.mark.asyncio
    async def test_claim_for_unknown_user_fails(self, unit_env):
        use_case = await unit_env.get(ClaimInvitesUseCase)

        response = await use_case.execute(ClaimInvitesRequest(user_id=str(uuid4())))

        assert response.error == InviteErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_sweep(self, unit_env):
        # Arrange
        owner, group = await seed_group(unit_env)
        await insert_invite(
            unit_env,
            email="a@x.com",
            invited_by=owner.id,
            group_id=group.id,
            created_at=utcnow() - timedelta(days=8),
        )
        use_case = await unit_env.get(SweepExpiredInvitesUseCase)

        # Act
        first = await use_case.execute(SweepExpiredRequest())
        second = await use_case.execute(SweepExpiredRequest())

        # Assert
        assert first.expired == 1
        assert second.expired == 0
