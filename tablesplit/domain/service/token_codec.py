"""Invite token codec.

Generates one-time invite secrets and derives the keyed fingerprint that
is stored in their place.
"""

import hashlib
import hmac
import re
import secrets

from tablesplit.domain.value import TokenFingerprint

from .base import Service

# secrets.token_urlsafe alphabet
_SECRET_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,255}$")


class TokenCodec(Service):
    """Generate secrets and match them against stored fingerprints.

    The fingerprint is HMAC-SHA256 keyed with a server-side secret, so it
    is deterministic (lookups are a direct index hit) but useless to anyone
    who reads the invites table without the key.
    """

    SECRET_BYTES = 32  # 256 bits of entropy

    def __init__(self, key: str) -> None:
        """Initialize token codec.

        Args:
            key: Server-side HMAC key
        """
        if not key:
            raise ValueError("Token codec key must not be empty")
        self._key = key.encode("utf-8")

    def generate(self) -> tuple[str, TokenFingerprint]:
        """Generate a new secret and its fingerprint.

        Returns:
            Tuple of (plaintext secret, fingerprint). The secret must only be
            embedded in the delivered invite link.
        """
        secret = secrets.token_urlsafe(self.SECRET_BYTES)
        return secret, self._derive(secret)

    def fingerprint(self, secret: object) -> TokenFingerprint | None:
        """Derive the fingerprint of a presented secret.

        Args:
            secret: Secret as presented by the caller

        Returns:
            The fingerprint, or None if the secret is malformed
        """
        if not isinstance(secret, str) or not _SECRET_PATTERN.match(secret):
            return None
        return self._derive(secret)

    def matches(self, secret: object, fingerprint: TokenFingerprint) -> bool:
        """Check a presented secret against a stored fingerprint.

        Never raises: malformed input and mismatches both return False.

        Args:
            secret: Secret as presented by the caller
            fingerprint: Stored fingerprint

        Returns:
            True if the secret derives to the fingerprint
        """
        try:
            candidate = self.fingerprint(secret)
            if candidate is None:
                return False
            return hmac.compare_digest(candidate.root, fingerprint.root)
        except (TypeError, ValueError, AttributeError):
            return False

    def _derive(self, secret: str) -> TokenFingerprint:
        digest = hmac.new(self._key, secret.encode("utf-8"), hashlib.sha256)
        return TokenFingerprint(digest.hexdigest())
