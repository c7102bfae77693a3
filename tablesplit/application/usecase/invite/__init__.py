"""Invite use cases."""

from tablesplit.application.usecase.invite.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
)
from tablesplit.application.usecase.invite.cancel_invite import (
    CancelInviteRequest,
    CancelInviteResponse,
    CancelInviteUseCase,
)
from tablesplit.application.usecase.invite.claim_invites import (
    ClaimInvitesRequest,
    ClaimInvitesResponse,
    ClaimInvitesUseCase,
)
from tablesplit.application.usecase.invite.common import InviteItem, InviteResult
from tablesplit.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from tablesplit.application.usecase.invite.get_audit_trail import (
    GetAuditTrailRequest,
    GetAuditTrailResponse,
    GetAuditTrailUseCase,
)
from tablesplit.application.usecase.invite.list_invites import (
    ListGroupInvitesRequest,
    ListGroupInvitesUseCase,
    ListInvitesResponse,
    ListSentInvitesRequest,
    ListSentInvitesUseCase,
)
from tablesplit.application.usecase.invite.opt_out import (
    OptOutRequest,
    OptOutResponse,
    OptOutUseCase,
)
from tablesplit.application.usecase.invite.resend_invite import (
    ResendInviteRequest,
    ResendInviteResponse,
    ResendInviteUseCase,
)
from tablesplit.application.usecase.invite.sweep_expired import (
    SweepExpiredInvitesUseCase,
    SweepExpiredRequest,
    SweepExpiredResponse,
)
from tablesplit.application.usecase.invite.verify_invite import (
    VerifyInviteRequest,
    VerifyInviteResponse,
    VerifyInviteUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteResponse",
    "AcceptInviteUseCase",
    "CancelInviteRequest",
    "CancelInviteResponse",
    "CancelInviteUseCase",
    "ClaimInvitesRequest",
    "ClaimInvitesResponse",
    "ClaimInvitesUseCase",
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "GetAuditTrailRequest",
    "GetAuditTrailResponse",
    "GetAuditTrailUseCase",
    "InviteItem",
    "InviteResult",
    "ListGroupInvitesRequest",
    "ListGroupInvitesUseCase",
    "ListInvitesResponse",
    "ListSentInvitesRequest",
    "ListSentInvitesUseCase",
    "OptOutRequest",
    "OptOutResponse",
    "OptOutUseCase",
    "ResendInviteRequest",
    "ResendInviteResponse",
    "ResendInviteUseCase",
    "SweepExpiredInvitesUseCase",
    "SweepExpiredRequest",
    "SweepExpiredResponse",
    "VerifyInviteRequest",
    "VerifyInviteResponse",
    "VerifyInviteUseCase",
]
