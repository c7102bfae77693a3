"""Unit tests for the EmailAddress value object."""

import pytest
from pydantic import ValidationError

from tablesplit.domain.value import EmailAddress


class TestEmailAddress:
    """Normalization and validation of invite target addresses."""

    def test_trims_and_lowercases(self):
        assert EmailAddress("  Alice@Example.COM ") == EmailAddress("alice@example.com")
        assert EmailAddress("  Alice@Example.COM ").root == "alice@example.com"

    def test_accepts_plus_and_subdomains(self):
        email = EmailAddress("a.b+trip@mail.example.co.uk")

        assert email.root == "a.b+trip@mail.example.co.uk"

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "not-an-email",
            "a@b..com",
            "a..b@x.com",
            "<a>@x.com",
            "a@-x-.com",
            "Alice <a@x.com>",
            "a b@x.com",
        ],
    )
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValidationError):
            EmailAddress(raw)

    def test_rejects_overlong(self):
        with pytest.raises(ValidationError):
            EmailAddress("a" * 64 + "@" + ".".join(["b" * 60] * 4) + ".com")
