"""Accept invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tablesplit.application.usecase.base import BaseUseCase
from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService
from tablesplit.domain.value import UserId

from .common import InviteItem, InviteResult, failure


class AcceptInviteRequest(BaseModel):
    """Accept invite request."""

    token: str
    user_id: str  # User ID from auth


class AcceptInviteResponse(InviteResult):
    """Accept invite response."""

    invite: InviteItem | None = None
    group_id: str | None = None


class AcceptInviteUseCase(BaseUseCase):
    """Use case for joining a group through an invite link."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize accept invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        """Accept an invite for the signed-in user.

        Args:
            request: Invite secret and accepting user

        Returns:
            Response with the accepted invite or the failure kind
        """
        with logfire.span(
            "accept_invite.execute",
            token=request.token[:8] + "...",
            user_id=request.user_id,
        ):
            try:
                invite = await self.invite_service.accept_invite(
                    request.token, UserId(UUID(request.user_id))
                )
            except DomainError as e:
                logfire.warn("Invite not accepted", kind=e.kind.value, error=str(e))
                return failure(AcceptInviteResponse, e)

            return AcceptInviteResponse(
                invite=InviteItem.from_invite(invite),
                group_id=str(invite.group_id),
                message="Joined group",
            )
