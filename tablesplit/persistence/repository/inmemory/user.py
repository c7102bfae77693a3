"""In-memory user repository for testing."""

from typing import Optional

from tablesplit.domain.model.user import User
from tablesplit.domain.repository.user import UserRepository
from tablesplit.domain.value import EmailAddress, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: EmailAddress) -> Optional[User]:
        """Find a user by normalized email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        self._users[user.id] = user
        return user
