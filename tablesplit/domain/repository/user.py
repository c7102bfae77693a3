"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tablesplit.domain.model.user import User
from tablesplit.domain.value import EmailAddress, UserId


class UserRepository(ABC):
    """User directory.

    Invites only read from it; save exists for seeding and signup flows
    owned by other services.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass
