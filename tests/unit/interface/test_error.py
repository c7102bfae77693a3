"""Tests for HTTP error mapping."""

import pytest
from fastapi import HTTPException

from tablesplit.application.usecase.invite import VerifyInviteResponse
from tablesplit.domain.error import InviteErrorKind
from tablesplit.interface.error import ERROR_STATUS, raise_for_result


class TestRaiseForResult:
    """Tests for raise_for_result."""

    def test_ok_result_passes(self):
        raise_for_result(VerifyInviteResponse())

    @pytest.mark.parametrize(
        ("kind", "status_code"),
        [
            (InviteErrorKind.INVALID_TOKEN, 404),
            (InviteErrorKind.TOKEN_EXPIRED, 410),
            (InviteErrorKind.ALREADY_ACCEPTED, 409),
            (InviteErrorKind.DEPENDENCY_FAILURE, 503),
            (InviteErrorKind.RATE_LIMITED, 429),
        ],
    )
    def test_failure_maps_to_status(self, kind, status_code):
        result = VerifyInviteResponse(ok=False, error=kind, message="nope")

        with pytest.raises(HTTPException) as exc_info:
            raise_for_result(result)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.detail == {"error": kind.value, "message": "nope"}

    def test_every_kind_has_a_status(self):
        assert set(ERROR_STATUS) == set(InviteErrorKind)
