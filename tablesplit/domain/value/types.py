"""Domain value objects for TableSplit invitations.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator
from pydantic.networks import validate_email

from tablesplit.domain.value.common import RootValueObject

_FINGERPRINT_PATTERN = re.compile(r"^[0-9a-f]{64}$")


class InviteStatus(str, Enum):
    """Status of an invite.

    Only PENDING can transition; the other three are terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class AuditAction(str, Enum):
    """Lifecycle event recorded in the invite audit trail."""

    CREATED = "created"
    SENT = "sent"
    RESENT = "resent"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class EmailAddress(RootValueObject[str]):
    """Normalized email address (trimmed, lowercase).

    Normalization happens before validation, so
    ``EmailAddress("  Alice@Example.COM ")`` equals
    ``EmailAddress("alice@example.com")``.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        """Trim and lowercase the raw value."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate the address with email-validator.

        Display-name forms such as ``Alice <a@x.com>`` are rejected; only a
        bare address is accepted.
        """
        if len(v) > 254:
            raise ValueError("Invalid email address")
        _, address = validate_email(v)
        if address.lower() != v:
            raise ValueError("Invalid email address")
        return v


class TokenFingerprint(RootValueObject[str]):
    """Keyed, non-reversible digest of an invite secret (hex HMAC-SHA256)."""

    @field_validator("root")
    @classmethod
    def validate_fingerprint_format(cls, v: str) -> str:
        """Validate fingerprint is 64 lowercase hex characters."""
        if not _FINGERPRINT_PATTERN.match(v):
            raise ValueError("Fingerprint must be 64 lowercase hex characters")
        return v
