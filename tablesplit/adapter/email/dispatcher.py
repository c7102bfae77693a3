"""Invite email dispatchers.

The real dispatcher posts to a transactional email HTTP API (Resend-style
JSON body, bearer key). The mock records messages for tests.
"""

from html import escape

import httpx
import logfire
from pydantic import BaseModel

from tablesplit.adapter.error import EmailDeliveryError
from tablesplit.domain.service.notification import NotificationDispatcher
from tablesplit.domain.value import EmailAddress, ExpenseId, GroupId


class InviteEmail(BaseModel):
    """Rendered invite email."""

    to: str
    subject: str
    html: str
    join_link: str


def build_join_link(frontend_url: str, secret: str) -> str:
    """Link the invitee opens to join."""
    return f"{frontend_url.rstrip('/')}/groups/join/{secret}"


def render_invite_email(
    email: EmailAddress,
    join_link: str,
    inviter_name: str,
    group_name: str | None,
    expense_id: ExpenseId | None = None,
) -> InviteEmail:
    """Render the subject and HTML body of an invite email."""
    group_label = group_name or "a group"
    subject = f'You\'re invited to join "{group_label}" on TableSplit'
    scope = " and split an expense with them" if expense_id else ""

    html = f"""
    <html>
    <body style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">
        <h1 style="color: #1a4d2e;">TableSplit</h1>
        <p><strong>{escape(inviter_name)}</strong> invited you to join
        <strong>{escape(group_label)}</strong>{scope}.</p>
        <p style="text-align: center; margin: 30px 0;">
            <a href="{escape(join_link)}"
               style="background: #1a4d2e; color: #fff; padding: 12px 24px; border-radius: 6px; text-decoration: none;">
                Join group
            </a>
        </p>
        <p style="color: #666; font-size: 12px;">
            This invite expires in 7 days. If you weren't expecting it, you can ignore this email.
        </p>
    </body>
    </html>
    """

    return InviteEmail(to=email.root, subject=subject, html=html, join_link=join_link)


class HttpEmailNotificationDispatcher(NotificationDispatcher):
    """Sends invite emails through an HTTP email API."""

    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        from_address: str,
        frontend_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize email dispatcher.

        Args:
            api_url: Email API endpoint
            api_key: Bearer key; when unset, sends fail fast
            from_address: Sender address
            frontend_url: Base URL for join links
            timeout: HTTP timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.api_url = api_url
        self.api_key = api_key
        self.from_address = from_address
        self.frontend_url = frontend_url
        self.timeout = timeout
        self.transport = transport

    async def send_invite(
        self,
        email: EmailAddress,
        group_id: GroupId,
        secret: str,
        inviter_name: str,
        group_name: str | None = None,
        expense_id: ExpenseId | None = None,
    ) -> None:
        """Send the invite email.

        Raises:
            EmailDeliveryError: If the API is not configured or rejects the send
        """
        if not self.api_key:
            logfire.warn("Email API key not configured, invite email not sent")
            raise EmailDeliveryError("Email delivery is not configured")

        message = render_invite_email(
            email,
            build_join_link(self.frontend_url, secret),
            inviter_name,
            group_name,
            expense_id,
        )
        payload = {
            "from": self.from_address,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
        }

        with logfire.span(
            "email.send_invite", group_id=str(group_id), email=email.root
        ):
            try:
                async with httpx.AsyncClient(transport=self.transport) as client:
                    response = await client.post(
                        self.api_url,
                        json=payload,
                        headers={"Authorization": f"Bearer {self.api_key}"},
                        timeout=self.timeout,
                    )
            except httpx.HTTPError as e:
                logfire.error("Email API HTTP error", error=str(e))
                raise EmailDeliveryError(f"HTTP error sending invite email: {e}") from e

            if response.status_code >= 400:
                logfire.error(
                    "Email API rejected invite email",
                    status_code=response.status_code,
                    error=response.text,
                )
                raise EmailDeliveryError(
                    f"Email API returned {response.status_code}"
                )

            logfire.info("Invite email sent", group_id=str(group_id))


class MockNotificationDispatcher(NotificationDispatcher):
    """Records invite emails instead of sending them.

    Set ``fail`` to simulate a delivery outage.
    """

    def __init__(self, frontend_url: str = "http://localhost:3000") -> None:
        self.frontend_url = frontend_url
        self.sent: list[InviteEmail] = []
        self.secrets: list[str] = []
        self.fail = False

    async def send_invite(
        self,
        email: EmailAddress,
        group_id: GroupId,
        secret: str,
        inviter_name: str,
        group_name: str | None = None,
        expense_id: ExpenseId | None = None,
    ) -> None:
        if self.fail:
            raise EmailDeliveryError("Mock email outage")
        self.sent.append(
            render_invite_email(
                email,
                build_join_link(self.frontend_url, secret),
                inviter_name,
                group_name,
                expense_id,
            )
        )
        self.secrets.append(secret)

    @property
    def last_secret(self) -> str:
        """Secret from the most recent send."""
        return self.secrets[-1]
