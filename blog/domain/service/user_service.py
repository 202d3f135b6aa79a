"""User domain service."""

from typing import Optional

import logfire

from blog.domain.error import BusinessRuleViolationError, NotFoundError
from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import DisplayName, Email, PasswordHash, Uuid


class UserService:
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: Uuid) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_email(self, email: Email) -> Optional[User]:
        """Get user by email.

        Args:
            email: Email address

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email"):
            return await self.user_repository.find_by_email(email)

    async def get_users_by_ids(self, user_ids: list[Uuid]) -> dict[str, User]:
        """Load several users in one lookup.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Users keyed by ID string; missing users are left out
        """
        with logfire.span("user_service.get_users_by_ids", count=len(user_ids)):
            users = await self.user_repository.find_by_ids(user_ids)
            return {user.id.root: user for user in users}

    async def register_user(
        self,
        email: Email,
        password_hash: PasswordHash,
        display_name: DisplayName,
        avatar_url: Optional[str] = None,
    ) -> User:
        """Register a new active user.

        Args:
            email: Email address (unique, case-insensitive)
            password_hash: Hash of the user's password
            display_name: Display name
            avatar_url: Optional avatar URL

        Returns:
            Created user

        Raises:
            BusinessRuleViolationError: If the email is already registered
        """
        with logfire.span("user_service.register_user"):
            if await self.user_repository.find_by_email(email) is not None:
                logfire.warn("Email already registered")
                raise BusinessRuleViolationError("Email is already registered")

            user = User.create(
                email=email,
                password_hash=password_hash,
                display_name=display_name,
                avatar_url=avatar_url,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def record_login(self, user: User) -> User:
        """Stamp the user's last login time and save.

        Args:
            user: Authenticated user

        Returns:
            Saved user
        """
        with logfire.span("user_service.record_login", user_id=str(user.id)):
            user.update_last_login()
            return await self.user_repository.save(user)
