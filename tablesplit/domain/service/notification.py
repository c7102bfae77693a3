"""Notification dispatcher interface.

The invite service decides when to send; implementations decide how.
"""

from abc import ABC, abstractmethod

from tablesplit.domain.value import EmailAddress, ExpenseId, GroupId


class NotificationError(Exception):
    """Invite notification could not be delivered."""

    pass


class NotificationDispatcher(ABC):
    """Abstract sender for invite emails.

    Implementations raise NotificationError when delivery fails; the caller
    logs the failure and carries on.
    """

    @abstractmethod
    async def send_invite(
        self,
        email: EmailAddress,
        group_id: GroupId,
        secret: str,
        inviter_name: str,
        group_name: str | None = None,
        expense_id: ExpenseId | None = None,
    ) -> None:
        """Send the invite link for ``secret`` to ``email``.

        Args:
            email: Invitee address
            group_id: Group being joined
            secret: Plaintext invite secret, embedded in the link
            inviter_name: Display name of the inviter
            group_name: Group display name, if known
            expense_id: Expense the invite is scoped to, if any

        Raises:
            NotificationError: If delivery failed
        """
        pass
