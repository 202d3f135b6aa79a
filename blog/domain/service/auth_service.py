"""Authentication domain service."""

from abc import ABC, abstractmethod

import logfire

from blog.domain.error import InvalidCredentialsError
from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import Email

from .base import Service


class PasswordHasher(ABC):
    """Password hashing interface.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    def hash(self, plain: str) -> str:
        """Hash a plain-text password.

        Args:
            plain: Plain-text password

        Returns:
            Opaque hash suitable for storage
        """
        pass

    @abstractmethod
    def verify(self, plain: str, hashed: str) -> bool:
        """Check a plain-text password against a stored hash.

        Args:
            plain: Plain-text password
            hashed: Stored hash

        Returns:
            True if the password matches
        """
        pass


class AuthService(Service):
    """Domain service for email/password authentication."""

    def __init__(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            password_hasher: Password hasher
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def validate_credentials(self, email: Email, password: str) -> User:
        """Authenticate a user by email and password.

        Unknown emails, wrong passwords and inactive users fail the same way
        so callers cannot probe which accounts exist.

        Args:
            email: Email address
            password: Plain-text password

        Returns:
            The authenticated user

        Raises:
            InvalidCredentialsError: If the credentials do not authenticate
                an active user
        """
        with logfire.span("auth_service.validate_credentials"):
            user = await self.user_repository.find_by_email(email)
            if user is None:
                logfire.warn("Login attempt for unknown email")
                raise InvalidCredentialsError()

            if not self.password_hasher.verify(password, user.password_hash.root):
                logfire.warn("Login attempt with wrong password", user_id=str(user.id))
                raise InvalidCredentialsError()

            if not user.is_active:
                logfire.warn("Login attempt by inactive user", user_id=str(user.id))
                raise InvalidCredentialsError()

            logfire.info("Credentials validated", user_id=str(user.id))
            return user

    def hash_password(self, password: str) -> str:
        """Hash a plain-text password for storage."""
        return self.password_hasher.hash(password)
