"""Verify invite use case."""

import logfire
from pydantic import BaseModel

from tablesplit.domain.error import DomainError
from tablesplit.domain.repository import GroupRepository, UserRepository
from tablesplit.domain.service import InviteService

from .common import InviteResult, failure


class VerifyInviteRequest(BaseModel):
    """Verify invite request."""

    token: str


class VerifyInviteResponse(InviteResult):
    """Verify invite response.

    Carries enough context for the join page without exposing the invite.
    """

    email: str | None = None
    group_id: str | None = None
    group_name: str | None = None
    expense_id: str | None = None
    inviter_name: str | None = None


class VerifyInviteUseCase:
    """Use case for checking an invite link before sign-in.

    Does not consume the invite.
    """

    def __init__(
        self,
        invite_service: InviteService,
        user_repository: UserRepository,
        group_repository: GroupRepository,
    ) -> None:
        self.invite_service = invite_service
        self.user_repository = user_repository
        self.group_repository = group_repository

    async def execute(self, request: VerifyInviteRequest) -> VerifyInviteResponse:
        with logfire.span("verify_invite.execute", token=request.token[:8] + "..."):
            try:
                invite = await self.invite_service.verify_invite(request.token)
                inviter = await self.user_repository.find_by_id(invite.invited_by)
                group = await self.group_repository.find_by_id(invite.group_id)
            except DomainError as e:
                logfire.info("Invite failed verification", kind=e.kind.value)
                return failure(VerifyInviteResponse, e)

            return VerifyInviteResponse(
                email=invite.email.root,
                group_id=str(invite.group_id),
                group_name=group.name if group else None,
                expense_id=str(invite.expense_id) if invite.expense_id else None,
                inviter_name=inviter.name if inviter else None,
                message="Valid invite",
            )
