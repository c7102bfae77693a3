"""Unit tests for TokenCodec."""

import pytest

from tablesplit.domain.service import TokenCodec
from tablesplit.domain.value import TokenFingerprint


class TestTokenCodec:
    """Tests for secret generation and matching."""

    def test_generate_returns_distinct_secrets(self):
        """Each call should yield a fresh secret and fingerprint."""
        codec = TokenCodec("test-key")

        secrets = {codec.generate()[0] for _ in range(50)}

        assert len(secrets) == 50

    def test_secret_has_enough_entropy(self):
        """32 random bytes encode to at least 43 URL-safe characters."""
        codec = TokenCodec("test-key")

        secret, _ = codec.generate()

        assert len(secret) >= 43

    def test_fingerprint_is_deterministic(self):
        """The same secret and key always give the same fingerprint."""
        codec = TokenCodec("test-key")
        secret, fingerprint = codec.generate()

        assert codec.fingerprint(secret) == fingerprint
        assert TokenCodec("test-key").fingerprint(secret) == fingerprint

    def test_fingerprint_depends_on_key(self):
        """A different key must not reproduce the fingerprint."""
        secret, fingerprint = TokenCodec("key-one").generate()

        assert TokenCodec("key-two").fingerprint(secret) != fingerprint
        assert not TokenCodec("key-two").matches(secret, fingerprint)

    def test_matches_valid_secret(self):
        codec = TokenCodec("test-key")
        secret, fingerprint = codec.generate()

        assert codec.matches(secret, fingerprint)

    def test_rejects_other_secret(self):
        codec = TokenCodec("test-key")
        _, fingerprint = codec.generate()
        other, _ = codec.generate()

        assert not codec.matches(other, fingerprint)

    @pytest.mark.parametrize(
        "presented", [None, 42, b"bytes", "", "has space", "semi;colon", "x" * 256]
    )
    def test_malformed_input_never_raises(self, presented):
        """Malformed input is a mismatch, not an error."""
        codec = TokenCodec("test-key")
        _, fingerprint = codec.generate()

        assert codec.fingerprint(presented) is None
        assert codec.matches(presented, fingerprint) is False

    def test_fingerprint_shape(self):
        codec = TokenCodec("test-key")

        _, fingerprint = codec.generate()

        assert isinstance(fingerprint, TokenFingerprint)
        assert len(fingerprint.root) == 64

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            TokenCodec("")
