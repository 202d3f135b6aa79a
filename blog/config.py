"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blog.domain.value.pagination import MAX_PAGE_SIZE


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # JWT settings
    # Must be overridden in production; HS256 keys should be at least 32 bytes
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION_0123456789abcdef"
    jwt_algorithm: str = "HS256"
    jwt_expiry_minutes: int = 15


class SecuritySettings(BaseModel):
    """Password hashing configuration."""

    # bcrypt work factor; lower it in tests only
    bcrypt_rounds: int = 12


class PaginationSettings(BaseModel):
    """Listing page sizes."""

    default_size: int = 10
    max_size: int = 50

    # Replies shown under each top-level comment in a comment listing
    reply_preview_size: int = 2

    @model_validator(mode="after")
    def check_sizes(self) -> "PaginationSettings":
        if not 1 <= self.max_size <= MAX_PAGE_SIZE:
            raise ValueError(f"max_size must be between 1 and {MAX_PAGE_SIZE}")
        if not 1 <= self.default_size <= self.max_size:
            raise ValueError("default_size must be between 1 and max_size")
        if not 0 <= self.reply_preview_size <= self.max_size:
            raise ValueError("reply_preview_size must be between 0 and max_size")
        return self


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class SeedSettings(BaseModel):
    """Seed script configuration."""

    # Password given to every seeded user
    default_password: str = "password123"

    # Seeded users get <slugified author name>@<email_domain>
    email_domain: str = "blog.dev"

    # JSON array of {title, author, content, tag1, tag2, tag3} rows
    articles_path: Path = Path("scripts/data/articles.json")


class Settings(BaseSettings):
    """Application settings.

    Loaded from environment variables and an optional .env file. Nested
    settings use a double underscore, for example:

        AUTH__JWT_SECRET=...
        SECURITY__BCRYPT_ROUNDS=10
        PAGINATION__MAX_SIZE=100
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows AUTH__JWT_SECRET syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    auth: AuthSettings = AuthSettings()
    security: SecuritySettings = SecuritySettings()
    pagination: PaginationSettings = PaginationSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    seed: SeedSettings = SeedSettings()
