"""Domain layer errors.

Every invite error carries a stable ``kind`` so the application layer
can report failures without leaking exception types to callers.
"""

from enum import Enum


class InviteErrorKind(str, Enum):
    """Error kinds exposed by the public invite operations."""

    NOT_FOUND = "not_found"
    INVALID_TOKEN = "invalid_token"
    TOKEN_EXPIRED = "token_expired"
    CONFLICT = "conflict"
    ALREADY_ACCEPTED = "already_accepted"
    DEPENDENCY_FAILURE = "dependency_failure"
    NOT_AUTHORIZED = "not_authorized"
    RATE_LIMITED = "rate_limited"
    ALREADY_REGISTERED = "already_registered"
    INVALID_REQUEST = "invalid_request"


class DomainError(Exception):
    """Base domain error."""

    kind: InviteErrorKind = InviteErrorKind.INVALID_REQUEST


class ValidationError(DomainError):
    """Domain validation error."""

    kind = InviteErrorKind.INVALID_REQUEST


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    kind = InviteErrorKind.INVALID_REQUEST


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = InviteErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a group or invite they don't own."""

    kind = InviteErrorKind.NOT_AUTHORIZED

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class InvalidTokenError(DomainError):
    """Secret is unknown, malformed, or its invite is no longer pending.

    Terminal states deliberately look the same as an unknown secret.
    """

    kind = InviteErrorKind.INVALID_TOKEN

    def __init__(self) -> None:
        super().__init__("This invite link is no longer valid")


class TokenExpiredError(DomainError):
    """Invite was pending but its validity window has passed."""

    kind = InviteErrorKind.TOKEN_EXPIRED

    def __init__(self) -> None:
        super().__init__("This invite has expired. Ask for a new invite.")


class ConflictError(DomainError):
    """Uniqueness violation or a lost compare-and-swap."""

    kind = InviteErrorKind.CONFLICT


class AlreadyAcceptedError(ConflictError):
    """A concurrent accept won the compare-and-swap."""

    kind = InviteErrorKind.ALREADY_ACCEPTED

    def __init__(self, invite_id: str):
        super().__init__(f"Invite {invite_id} has already been accepted")


class DependencyFailureError(DomainError):
    """A store or collaborator was unavailable or timed out."""

    kind = InviteErrorKind.DEPENDENCY_FAILURE


class RateLimitExceededError(BusinessRuleViolationError):
    """Inviter sent too many invites in the rolling window."""

    kind = InviteErrorKind.RATE_LIMITED

    def __init__(self, limit: int):
        super().__init__(
            f"Too many invites sent. Limit is {limit} per 24 hours, please wait."
        )


class AlreadyRegisteredError(BusinessRuleViolationError):
    """Invitee already has an account and should be added directly."""

    kind = InviteErrorKind.ALREADY_REGISTERED

    def __init__(self, email: str):
        super().__init__(
            f"{email} is already registered. Add them directly to the group."
        )
