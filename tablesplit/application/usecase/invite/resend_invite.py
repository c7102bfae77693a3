"""Resend invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService
from tablesplit.domain.value import InviteId, UserId

from .common import InviteItem, InviteResult, failure


class ResendInviteRequest(BaseModel):
    """Resend invite request."""

    invite_id: UUID
    user_id: str  # User ID from auth


class ResendInviteResponse(InviteResult):
    """Resend invite response.

    ``invite`` is the replacement; the original is cancelled.
    """

    invite: InviteItem | None = None
    replaced_invite_id: str | None = None
    notification_sent: bool = False


class ResendInviteUseCase:
    """Use case for re-sending a pending invite with a fresh link."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: ResendInviteRequest) -> ResendInviteResponse:
        with logfire.span(
            "resend_invite.execute",
            invite_id=str(request.invite_id),
            user_id=request.user_id,
        ):
            try:
                issued = await self.invite_service.resend_invite(
                    InviteId(request.invite_id), UserId(UUID(request.user_id))
                )
            except DomainError as e:
                logfire.warn("Invite not resent", kind=e.kind.value, error=str(e))
                return failure(ResendInviteResponse, e)

            return ResendInviteResponse(
                invite=InviteItem.from_invite(issued.invite),
                replaced_invite_id=str(request.invite_id),
                notification_sent=issued.notification_sent,
                message="Invite resent"
                if issued.notification_sent
                else "Invite renewed, but the email could not be sent",
            )
