"""User aggregate root.

Users sign in with email and password. Only active users can authenticate.
"""

from typing import Optional

from pydantic import AwareDatetime

from blog.domain.model.common import DomainModel, next_timestamp, utc_now
from blog.domain.value import DisplayName, Email, PasswordHash, Uuid


class User(DomainModel):
    """Registered user."""

    id: Uuid
    email: Email  # Unique
    password_hash: PasswordHash
    display_name: DisplayName
    avatar_url: Optional[str] = None
    is_active: bool = True
    last_login_at: Optional[AwareDatetime] = None
    created_at: AwareDatetime
    updated_at: AwareDatetime

    @classmethod
    def create(
        cls,
        email: Email,
        password_hash: PasswordHash,
        display_name: DisplayName,
        avatar_url: Optional[str] = None,
        is_active: bool = True,
        id: Optional[Uuid] = None,
    ) -> "User":
        """Create a new user, active unless stated otherwise."""
        now = utc_now()
        return cls(
            id=id or Uuid.generate(),
            email=email,
            password_hash=password_hash,
            display_name=display_name,
            avatar_url=avatar_url,
            is_active=is_active,
            last_login_at=None,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(
        cls,
        id: Uuid,
        email: Email,
        password_hash: PasswordHash,
        display_name: DisplayName,
        avatar_url: Optional[str],
        is_active: bool,
        last_login_at: Optional[AwareDatetime],
        created_at: AwareDatetime,
        updated_at: AwareDatetime,
    ) -> "User":
        """Rebuild a user from persisted state."""
        return cls(
            id=id,
            email=email,
            password_hash=password_hash,
            display_name=display_name,
            avatar_url=avatar_url,
            is_active=is_active,
            last_login_at=last_login_at,
            created_at=created_at,
            updated_at=updated_at,
        )

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def update_last_login(self) -> None:
        self.last_login_at = utc_now()
        self._touch()

    def change_display_name(self, display_name: DisplayName) -> None:
        self.display_name = display_name
        self._touch()

    def change_avatar_url(self, avatar_url: Optional[str]) -> None:
        self.avatar_url = avatar_url
        self._touch()

    def _touch(self) -> None:
        self.updated_at = next_timestamp(self.updated_at)
