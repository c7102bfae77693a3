"""Mock notification providers for testing."""

from dishka import Scope, alias, provide

from tablesplit.adapter.email import MockNotificationDispatcher
from tablesplit.domain.service import NotificationDispatcher
from tablesplit.util.di.infrastructure.notification import NotificationProvider


class MockNotificationProvider(NotificationProvider):
    """Mock notification provider recording sent invites."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_dispatcher(self) -> MockNotificationDispatcher:
        """Provide recording dispatcher."""
        return MockNotificationDispatcher()

    notification_dispatcher = alias(
        source=MockNotificationDispatcher, provides=NotificationDispatcher
    )
