"""Sweep expired invites use case."""

import logfire
from pydantic import BaseModel, Field

from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService

from .common import InviteResult, failure


class SweepExpiredRequest(BaseModel):
    """Sweep request."""

    batch_size: int | None = Field(default=None, ge=1)


class SweepExpiredResponse(InviteResult):
    """Sweep response."""

    expired: int = 0


class SweepExpiredInvitesUseCase:
    """Use case run by the scheduled sweep job."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: SweepExpiredRequest) -> SweepExpiredResponse:
        with logfire.span("sweep_expired.execute", batch_size=request.batch_size):
            try:
                expired = await self.invite_service.sweep_expired(request.batch_size)
            except DomainError as e:
                logfire.error("Invite sweep failed", error=str(e))
                return failure(SweepExpiredResponse, e)
            return SweepExpiredResponse(expired=expired)
