"""Create invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from tablesplit.application.usecase.base import BaseUseCase
from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService
from tablesplit.domain.value import ExpenseId, GroupId, UserId

from .common import InviteItem, InviteResult, failure


class CreateInviteRequest(BaseModel):
    """Create invite request."""

    inviter_id: str  # User ID from auth
    email: str
    group_id: UUID
    expense_id: UUID | None = None


class CreateInviteResponse(InviteResult):
    """Create invite response.

    The secret only travels in the email; it is not part of the response.
    """

    invite: InviteItem | None = None
    notification_sent: bool = False


class CreateInviteUseCase(BaseUseCase):
    """Use case for inviting someone to a group by email."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize create invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Create and send an invite.

        Args:
            request: Invitee email, target group and optional expense

        Returns:
            Response with the created invite or the failure kind
        """
        with logfire.span(
            "create_invite.execute",
            inviter_id=request.inviter_id,
            group_id=str(request.group_id),
        ):
            try:
                issued = await self.invite_service.create_invite(
                    request.email,
                    UserId(UUID(request.inviter_id)),
                    GroupId(request.group_id),
                    ExpenseId(request.expense_id) if request.expense_id else None,
                )
            except DomainError as e:
                logfire.warn(
                    "Invite not created", kind=e.kind.value, error=str(e)
                )
                return failure(CreateInviteResponse, e)

            if not issued.notification_sent:
                message = "Invite created, but the email could not be sent. Try resending."
            else:
                message = "Invite sent"

            return CreateInviteResponse(
                invite=InviteItem.from_invite(issued.invite),
                notification_sent=issued.notification_sent,
                message=message,
            )
