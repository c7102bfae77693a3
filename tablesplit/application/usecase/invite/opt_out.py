"""Opt-out use case."""

import logfire
from pydantic import BaseModel

from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService

from .common import InviteResult, failure


class OptOutRequest(BaseModel):
    """Opt-out request."""

    email: str


class OptOutResponse(InviteResult):
    """Opt-out response."""

    cancelled: int = 0


class OptOutUseCase:
    """Use case for an invitee declining all pending invites to their address."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: OptOutRequest) -> OptOutResponse:
        with logfire.span("opt_out.execute"):
            try:
                cancelled = await self.invite_service.opt_out(request.email)
            except DomainError as e:
                return failure(OptOutResponse, e)

            return OptOutResponse(
                cancelled=cancelled,
                message="You will not receive further invites at this address",
            )
