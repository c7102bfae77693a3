"""Tests for container wiring."""

import pytest

from tablesplit.domain.service import InviteService, TokenCodec
from tablesplit.util.error import ConfigurationError
from tests.di import build_test_container


class TestContainer:
    """Tests for provider selection and settings guards."""

    @pytest.mark.asyncio
    async def test_resolves_invite_service(self):
        container = build_test_container()

        async with container() as request_container:
            service = await request_container.get(InviteService)

        assert isinstance(service, InviteService)
        await container.close()

    @pytest.mark.asyncio
    async def test_production_rejects_placeholder_token_secret(self, monkeypatch):
        """Production must not start with the default token secret."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        container = build_test_container()

        with pytest.raises(ConfigurationError):
            await container.get(TokenCodec)
        await container.close()

    @pytest.mark.asyncio
    async def test_production_accepts_configured_secret(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("INVITATIONS__TOKEN_SECRET", "a-real-production-key")
        container = build_test_container()

        codec = await container.get(TokenCodec)

        assert isinstance(codec, TokenCodec)
        await container.close()

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"payments"})
