"""List invites use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService
from tablesplit.domain.value import GroupId, InviteStatus, UserId

from .common import InviteItem, InviteResult, failure


class ListGroupInvitesRequest(BaseModel):
    """List group invites request."""

    group_id: UUID
    user_id: str  # User ID from auth
    status: InviteStatus | None = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListSentInvitesRequest(BaseModel):
    """List sent invites request."""

    user_id: str  # User ID from auth
    status: InviteStatus | None = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListInvitesResponse(InviteResult):
    """List invites response."""

    invites: list[InviteItem] = []


class ListGroupInvitesUseCase:
    """Use case for a member viewing a group's invites."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: ListGroupInvitesRequest) -> ListInvitesResponse:
        with logfire.span(
            "list_group_invites.execute",
            group_id=str(request.group_id),
            user_id=request.user_id,
        ):
            try:
                invites = await self.invite_service.list_group_invites(
                    GroupId(request.group_id),
                    UserId(UUID(request.user_id)),
                    status=request.status,
                    limit=request.limit,
                    offset=request.offset,
                )
            except DomainError as e:
                return failure(ListInvitesResponse, e)

            return ListInvitesResponse(
                invites=[InviteItem.from_invite(i) for i in invites]
            )


class ListSentInvitesUseCase:
    """Use case for listing the invites a user has sent."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: ListSentInvitesRequest) -> ListInvitesResponse:
        with logfire.span("list_sent_invites.execute", user_id=request.user_id):
            try:
                invites = await self.invite_service.list_sent_invites(
                    UserId(UUID(request.user_id)),
                    status=request.status,
                    limit=request.limit,
                    offset=request.offset,
                )
            except DomainError as e:
                return failure(ListInvitesResponse, e)

            return ListInvitesResponse(
                invites=[InviteItem.from_invite(i) for i in invites]
            )
