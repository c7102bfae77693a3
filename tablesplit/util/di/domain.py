"""Domain layer DI providers."""

from dishka import Scope, provide

from tablesplit.config import AuthSettings, InvitationSettings, Settings
from tablesplit.domain.repository import (
    GroupRepository,
    InviteAuditRepository,
    InviteRepository,
    UserRepository,
)
from tablesplit.domain.service import (
    GroupMembershipApplier,
    InviteService,
    JWTService,
    MembershipApplier,
    NotificationDispatcher,
    TokenCodec,
)
from tablesplit.util.di.base import ProviderBase
from tablesplit.util.error import ConfigurationError

_DEFAULT_SECRET = "CHANGE_ME_IN_PRODUCTION"


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_token_codec(self, settings: Settings) -> TokenCodec:
        """Provide the invite token codec.

        Raises:
            ConfigurationError: If production runs with the default key
        """
        key = settings.invitations.token_secret
        if settings.environment == "production" and key == _DEFAULT_SECRET:
            raise ConfigurationError(
                "INVITATIONS__TOKEN_SECRET must be set in production"
            )
        return TokenCodec(key)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT session domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_membership_applier(
        self, group_repository: GroupRepository
    ) -> MembershipApplier:
        """Provide group membership applier."""
        return GroupMembershipApplier(group_repository=group_repository)

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        audit_repository: InviteAuditRepository,
        user_repository: UserRepository,
        group_repository: GroupRepository,
        membership_applier: MembershipApplier,
        notification_dispatcher: NotificationDispatcher,
        token_codec: TokenCodec,
        invitation_settings: InvitationSettings,
    ) -> InviteService:
        """Provide invite lifecycle domain service."""
        return InviteService(
            invite_repository=invite_repository,
            audit_repository=audit_repository,
            user_repository=user_repository,
            group_repository=group_repository,
            membership_applier=membership_applier,
            notification_dispatcher=notification_dispatcher,
            token_codec=token_codec,
            settings=invitation_settings,
        )
