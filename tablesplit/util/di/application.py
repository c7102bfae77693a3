"""Application layer DI providers."""

from dishka import Scope, provide

from tablesplit.application.usecase.invite import (
    AcceptInviteUseCase,
    CancelInviteUseCase,
    ClaimInvitesUseCase,
    CreateInviteUseCase,
    GetAuditTrailUseCase,
    ListGroupInvitesUseCase,
    ListSentInvitesUseCase,
    OptOutUseCase,
    ResendInviteUseCase,
    SweepExpiredInvitesUseCase,
    VerifyInviteUseCase,
)
from tablesplit.domain.repository import GroupRepository, UserRepository
from tablesplit.domain.service import InviteService
from tablesplit.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_invite_use_case(
        self, invite_service: InviteService
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(invite_service=invite_service)

    @provide
    def get_verify_invite_use_case(
        self,
        invite_service: InviteService,
        user_repository: UserRepository,
        group_repository: GroupRepository,
    ) -> VerifyInviteUseCase:
        """Provide verify invite use case."""
        return VerifyInviteUseCase(
            invite_service=invite_service,
            user_repository=user_repository,
            group_repository=group_repository,
        )

    @provide
    def get_accept_invite_use_case(
        self, invite_service: InviteService
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(invite_service=invite_service)

    @provide
    def get_cancel_invite_use_case(
        self, invite_service: InviteService
    ) -> CancelInviteUseCase:
        """Provide cancel invite use case."""
        return CancelInviteUseCase(invite_service=invite_service)

    @provide
    def get_resend_invite_use_case(
        self, invite_service: InviteService
    ) -> ResendInviteUseCase:
        """Provide resend invite use case."""
        return ResendInviteUseCase(invite_service=invite_service)

    @provide
    def get_list_group_invites_use_case(
        self, invite_service: InviteService
    ) -> ListGroupInvitesUseCase:
        """Provide list group invites use case."""
        return ListGroupInvitesUseCase(invite_service=invite_service)

    @provide
    def get_list_sent_invites_use_case(
        self, invite_service: InviteService
    ) -> ListSentInvitesUseCase:
        """Provide list sent invites use case."""
        return ListSentInvitesUseCase(invite_service=invite_service)

    @provide
    def get_opt_out_use_case(self, invite_service: InviteService) -> OptOutUseCase:
        """Provide opt-out use case."""
        return OptOutUseCase(invite_service=invite_service)

    @provide
    def get_audit_trail_use_case(
        self, invite_service: InviteService
    ) -> GetAuditTrailUseCase:
        """Provide audit trail use case."""
        return GetAuditTrailUseCase(invite_service=invite_service)

    @provide
    def get_claim_invites_use_case(
        self, invite_service: InviteService
    ) -> ClaimInvitesUseCase:
        """Provide claim invites use case."""
        return ClaimInvitesUseCase(invite_service=invite_service)

    @provide
    def get_sweep_expired_use_case(
        self, invite_service: InviteService
    ) -> SweepExpiredInvitesUseCase:
        """Provide sweep expired invites use case."""
        return SweepExpiredInvitesUseCase(invite_service=invite_service)
