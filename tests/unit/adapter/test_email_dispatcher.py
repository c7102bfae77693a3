"""Unit tests for the HTTP email dispatcher."""

import json
from uuid import uuid4

import httpx
import pytest

from tablesplit.adapter.email import (
    HttpEmailNotificationDispatcher,
    build_join_link,
    render_invite_email,
)
from tablesplit.adapter.error import EmailDeliveryError
from tablesplit.domain.service import NotificationError
from tablesplit.domain.value import EmailAddress, ExpenseId, GroupId

API_URL = "https://email.test/emails"


def make_dispatcher(handler, api_key: str | None = "re_test") -> HttpEmailNotificationDispatcher:
    return HttpEmailNotificationDispatcher(
        api_url=API_URL,
        api_key=api_key,
        from_address="TableSplit <noreply@tablesplit.app>",
        frontend_url="https://tablesplit.app",
        transport=httpx.MockTransport(handler),
    )


class TestRenderInviteEmail:
    """Tests for invite email rendering."""

    def test_join_link(self):
        assert (
            build_join_link("https://tablesplit.app/", "abc")
            == "https://tablesplit.app/groups/join/abc"
        )

    def test_render_escapes_names(self):
        message = render_invite_email(
            EmailAddress("a@x.com"),
            "https://tablesplit.app/groups/join/abc",
            "<b>Mallory</b>",
            "Trip & Co",
        )

        assert message.to == "a@x.com"
        assert message.subject == 'You\'re invited to join "Trip & Co" on TableSplit'
        assert "&lt;b&gt;Mallory&lt;/b&gt;" in message.html
        assert "Trip &amp; Co" in message.html

    def test_render_mentions_expense(self):
        message = render_invite_email(
            EmailAddress("a@x.com"),
            "https://tablesplit.app/groups/join/abc",
            "Olivia",
            "Trip",
            ExpenseId(uuid4()),
        )

        assert "split an expense" in message.html


class TestHttpEmailNotificationDispatcher:
    """Tests for sending through the email API."""

    @pytest.mark.asyncio
    async def test_posts_message(self):
        """The API should get the rendered message with a bearer key."""
        # Arrange
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"id": "msg_1"})

        dispatcher = make_dispatcher(handler)

        # Act
        await dispatcher.send_invite(
            EmailAddress("a@x.com"), GroupId(uuid4()), "secret-123", "Olivia", "Trip"
        )

        # Assert
        assert len(requests) == 1
        request = requests[0]
        assert str(request.url) == API_URL
        assert request.headers["Authorization"] == "Bearer re_test"
        body = json.loads(request.content)
        assert body["to"] == ["a@x.com"]
        assert body["from"] == "TableSplit <noreply@tablesplit.app>"
        assert "https://tablesplit.app/groups/join/secret-123" in body["html"]

    @pytest.mark.asyncio
    async def test_api_rejection_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json={"message": "invalid from"})

        dispatcher = make_dispatcher(handler)

        with pytest.raises(EmailDeliveryError):
            await dispatcher.send_invite(
                EmailAddress("a@x.com"), GroupId(uuid4()), "secret", "Olivia"
            )

    @pytest.mark.asyncio
    async def test_network_error_raises_notification_error(self):
        """Transport failures surface as the domain's NotificationError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        dispatcher = make_dispatcher(handler)

        with pytest.raises(NotificationError):
            await dispatcher.send_invite(
                EmailAddress("a@x.com"), GroupId(uuid4()), "secret", "Olivia"
            )

    @pytest.mark.asyncio
    async def test_missing_api_key_fails_without_request(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200)

        dispatcher = make_dispatcher(handler, api_key=None)

        with pytest.raises(EmailDeliveryError):
            await dispatcher.send_invite(
                EmailAddress("a@x.com"), GroupId(uuid4()), "secret", "Olivia"
            )
        assert calls == []
