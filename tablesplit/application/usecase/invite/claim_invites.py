"""Claim pending invites use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService
from tablesplit.domain.value import UserId

from .common import InviteItem, InviteResult, failure


class ClaimInvitesRequest(BaseModel):
    """Claim invites request."""

    user_id: str


class ClaimInvitesResponse(InviteResult):
    """Claim invites response."""

    accepted: list[InviteItem] = []


class ClaimInvitesUseCase:
    """Post-signup hook: join every group the new user was invited to."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: ClaimInvitesRequest) -> ClaimInvitesResponse:
        with logfire.span("claim_invites.execute", user_id=request.user_id):
            try:
                accepted = await self.invite_service.claim_pending_invites(
                    UserId(UUID(request.user_id))
                )
            except DomainError as e:
                return failure(ClaimInvitesResponse, e)

            return ClaimInvitesResponse(
                accepted=[InviteItem.from_invite(i) for i in accepted]
            )
