"""Cancel invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService
from tablesplit.domain.value import InviteId, UserId

from .common import InviteItem, InviteResult, failure


class CancelInviteRequest(BaseModel):
    """Cancel invite request."""

    invite_id: UUID
    user_id: str  # User ID from auth


class CancelInviteResponse(InviteResult):
    """Cancel invite response."""

    invite: InviteItem | None = None


class CancelInviteUseCase:
    """Use case for withdrawing a pending invite."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: CancelInviteRequest) -> CancelInviteResponse:
        with logfire.span(
            "cancel_invite.execute",
            invite_id=str(request.invite_id),
            user_id=request.user_id,
        ):
            try:
                invite = await self.invite_service.cancel_invite(
                    InviteId(request.invite_id), UserId(UUID(request.user_id))
                )
            except DomainError as e:
                return failure(CancelInviteResponse, e)

            return CancelInviteResponse(
                invite=InviteItem.from_invite(invite), message="Invite cancelled"
            )
