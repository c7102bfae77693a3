"""Infrastructure layer errors."""

from tablesplit.domain.service.notification import NotificationError


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class EmailDeliveryError(AdapterError, NotificationError):
    """Email provider rejected or never received the message."""

    pass
