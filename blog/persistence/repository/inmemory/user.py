"""In-memory user repository for testing."""

from copy import deepcopy
from typing import Optional

from blog.domain.model.user import User
from blog.domain.repository.user import UserRepository
from blog.domain.value import Email, Uuid


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def find_by_id(self, user_id: Uuid) -> Optional[User]:
        """Find a user by ID."""
        user = self._users.get(user_id.root)
        return deepcopy(user) if user else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email.equals(email):
                return deepcopy(user)
        return None

    async def find_by_ids(self, user_ids: list[Uuid]) -> list[User]:
        """Find several users at once."""
        wanted = {user_id.root for user_id in user_ids}
        return [deepcopy(u) for key, u in self._users.items() if key in wanted]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id.root] = deepcopy(user)
        return user

    async def delete(self, user_id: Uuid) -> None:
        """Delete a user."""
        self._users.pop(user_id.root, None)
