"""Notification infrastructure providers."""

from dishka import Scope, provide

from tablesplit.adapter.email import HttpEmailNotificationDispatcher
from tablesplit.config import Settings
from tablesplit.domain.service import NotificationDispatcher
from tablesplit.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider sending through the email API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_dispatcher(self, settings: Settings) -> NotificationDispatcher:
        """Provide invite email dispatcher.

        An unset API key is allowed: sends then fail and are reported as
        ``notification_sent=False``, leaving the invite usable.
        """
        return HttpEmailNotificationDispatcher(
            api_url=settings.email.api_url,
            api_key=settings.email.api_key,
            from_address=settings.email.from_address,
            frontend_url=settings.api.frontend_url,
            timeout=settings.email.timeout_seconds,
        )
