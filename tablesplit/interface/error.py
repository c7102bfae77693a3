"""Interface layer errors and HTTP status mapping."""

from fastapi import HTTPException, status

from tablesplit.application.usecase.invite import InviteResult
from tablesplit.domain.error import InviteErrorKind


ERROR_STATUS: dict[InviteErrorKind, int] = {
    InviteErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    InviteErrorKind.INVALID_TOKEN: status.HTTP_404_NOT_FOUND,
    InviteErrorKind.TOKEN_EXPIRED: status.HTTP_410_GONE,
    InviteErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    InviteErrorKind.ALREADY_ACCEPTED: status.HTTP_409_CONFLICT,
    InviteErrorKind.DEPENDENCY_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
    InviteErrorKind.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    InviteErrorKind.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    InviteErrorKind.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    InviteErrorKind.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
}


def raise_for_result(result: InviteResult) -> None:
    """Raise the HTTPException matching a failed use case response.

    The detail carries the error kind so clients can tell, say, an expired
    invite from an unknown one.
    """
    if result.ok:
        return
    kind = result.error or InviteErrorKind.INVALID_REQUEST
    raise HTTPException(
        status_code=ERROR_STATUS[kind],
        detail={"error": kind.value, "message": result.message},
    )
