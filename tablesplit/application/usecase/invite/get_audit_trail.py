"""Invite audit trail use case."""

from datetime import datetime
from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from tablesplit.domain.error import DomainError
from tablesplit.domain.service import InviteService
from tablesplit.domain.value import AuditAction, InviteId, UserId

from .common import InviteResult, failure


class AuditEntryItem(BaseModel):
    """Audit entry in response."""

    action: AuditAction
    performed_by: str | None = None
    metadata: dict[str, Any] = {}
    created_at: datetime


class GetAuditTrailRequest(BaseModel):
    """Audit trail request."""

    invite_id: UUID
    user_id: str  # User ID from auth


class GetAuditTrailResponse(InviteResult):
    """Audit trail response, newest entry first."""

    entries: list[AuditEntryItem] = []


class GetAuditTrailUseCase:
    """Use case for an inviter reviewing what happened to an invite."""

    def __init__(self, invite_service: InviteService) -> None:
        self.invite_service = invite_service

    async def execute(self, request: GetAuditTrailRequest) -> GetAuditTrailResponse:
        with logfire.span(
            "get_audit_trail.execute", invite_id=str(request.invite_id)
        ):
            try:
                entries = await self.invite_service.get_audit_trail(
                    InviteId(request.invite_id), UserId(UUID(request.user_id))
                )
            except DomainError as e:
                return failure(GetAuditTrailResponse, e)

            return GetAuditTrailResponse(
                entries=[
                    AuditEntryItem(
                        action=e.action,
                        performed_by=str(e.performed_by) if e.performed_by else None,
                        metadata=e.metadata,
                        created_at=e.created_at,
                    )
                    for e in entries
                ]
            )
