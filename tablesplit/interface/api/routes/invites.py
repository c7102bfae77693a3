"""Invite routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel

from tablesplit.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    CancelInviteRequest,
    CancelInviteResponse,
    CancelInviteUseCase,
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    GetAuditTrailRequest,
    GetAuditTrailResponse,
    GetAuditTrailUseCase,
    ListGroupInvitesRequest,
    ListGroupInvitesUseCase,
    ListInvitesResponse,
    ListSentInvitesRequest,
    ListSentInvitesUseCase,
    OptOutRequest,
    OptOutResponse,
    OptOutUseCase,
    ResendInviteRequest,
    ResendInviteResponse,
    ResendInviteUseCase,
    VerifyInviteRequest,
    VerifyInviteResponse,
    VerifyInviteUseCase,
)
from tablesplit.config import AuthSettings
from tablesplit.domain.service import JWTService
from tablesplit.domain.value import InviteStatus
from tablesplit.interface.api.routes.auth import authenticate
from tablesplit.interface.error import raise_for_result

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


class CreateInviteAPIRequest(BaseModel):
    """API request for creating an invite."""

    email: str
    group_id: UUID
    expense_id: UUID | None = None


class AcceptInviteAPIRequest(BaseModel):
    """API request for accepting an invite."""

    token: str


class OptOutAPIRequest(BaseModel):
    """API request for opting out of invites."""

    email: str


@router.post(
    "/", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    body: CreateInviteAPIRequest,
    request: Request,
    use_case: FromDishka[CreateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CreateInviteResponse:
    """Invite someone to a group by email.

    Raises:
        HTTPException: 401 unauthenticated, 403 not a member, 409 already
            registered, 429 rate limited, 400 bad email
    """
    payload = authenticate(request, jwt_service, auth_settings)
    response = await use_case.execute(
        CreateInviteRequest(
            inviter_id=payload.user_id,
            email=body.email,
            group_id=body.group_id,
            expense_id=body.expense_id,
        )
    )
    raise_for_result(response)
    return response


@router.get("/verify/{token}", response_model=VerifyInviteResponse)
async def verify_invite(
    token: str,
    use_case: FromDishka[VerifyInviteUseCase],
) -> VerifyInviteResponse:
    """Check an invite link. Public; does not consume the invite.

    Raises:
        HTTPException: 404 invalid, 410 expired
    """
    response = await use_case.execute(VerifyInviteRequest(token=token))
    raise_for_result(response)
    return response


@router.post("/accept", response_model=AcceptInviteResponse)
async def accept_invite(
    body: AcceptInviteAPIRequest,
    request: Request,
    use_case: FromDishka[AcceptInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> AcceptInviteResponse:
    """Accept an invite as the signed-in user.

    Raises:
        HTTPException: 404 invalid, 410 expired, 409 already accepted,
            503 membership or store unavailable
    """
    payload = authenticate(request, jwt_service, auth_settings)
    response = await use_case.execute(
        AcceptInviteRequest(token=body.token, user_id=payload.user_id)
    )
    raise_for_result(response)
    return response


@router.post("/opt-out", response_model=OptOutResponse)
async def opt_out(
    body: OptOutAPIRequest,
    use_case: FromDishka[OptOutUseCase],
) -> OptOutResponse:
    """Decline every pending invite to an address. Public."""
    response = await use_case.execute(OptOutRequest(email=body.email))
    raise_for_result(response)
    return response


@router.get("/sent", response_model=ListInvitesResponse)
async def list_sent_invites(
    request: Request,
    use_case: FromDishka[ListSentInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    status_filter: InviteStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListInvitesResponse:
    """List invites sent by the current user."""
    payload = authenticate(request, jwt_service, auth_settings)
    response = await use_case.execute(
        ListSentInvitesRequest(
            user_id=payload.user_id, status=status_filter, limit=limit, offset=offset
        )
    )
    raise_for_result(response)
    return response


@router.get("/group/{group_id}", response_model=ListInvitesResponse)
async def list_group_invites(
    group_id: UUID,
    request: Request,
    use_case: FromDishka[ListGroupInvitesUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
    status_filter: InviteStatus | None = Query(default=None, alias="status"),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListInvitesResponse:
    """List a group's invites. Members only."""
    payload = authenticate(request, jwt_service, auth_settings)
    response = await use_case.execute(
        ListGroupInvitesRequest(
            group_id=group_id,
            user_id=payload.user_id,
            status=status_filter,
            limit=limit,
            offset=offset,
        )
    )
    raise_for_result(response)
    return response


@router.post("/{invite_id}/resend", response_model=ResendInviteResponse)
async def resend_invite(
    invite_id: UUID,
    request: Request,
    use_case: FromDishka[ResendInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> ResendInviteResponse:
    """Replace a pending invite with a fresh link and send it again."""
    payload = authenticate(request, jwt_service, auth_settings)
    response = await use_case.execute(
        ResendInviteRequest(invite_id=invite_id, user_id=payload.user_id)
    )
    raise_for_result(response)
    return response


@router.get("/{invite_id}/audit", response_model=GetAuditTrailResponse)
async def get_audit_trail(
    invite_id: UUID,
    request: Request,
    use_case: FromDishka[GetAuditTrailUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> GetAuditTrailResponse:
    """Audit trail of an invite, newest first. Inviter only."""
    payload = authenticate(request, jwt_service, auth_settings)
    response = await use_case.execute(
        GetAuditTrailRequest(invite_id=invite_id, user_id=payload.user_id)
    )
    raise_for_result(response)
    return response


@router.delete("/{invite_id}", response_model=CancelInviteResponse)
async def cancel_invite(
    invite_id: UUID,
    request: Request,
    use_case: FromDishka[CancelInviteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_settings: FromDishka[AuthSettings],
) -> CancelInviteResponse:
    """Cancel a pending invite. Inviter only."""
    payload = authenticate(request, jwt_service, auth_settings)
    response = await use_case.execute(
        CancelInviteRequest(invite_id=invite_id, user_id=payload.user_id)
    )
    raise_for_result(response)
    return response
