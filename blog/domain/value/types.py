"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
Each one validates its raw input once, at construction, by composing the
small rule functions below. Construct them with ``Type.create(raw)`` to get
a domain ValidationError on bad input.
"""

import re
from typing import Optional
from uuid import uuid4

from email_validator import EmailNotValidError, validate_email
from pydantic import field_validator

from blog.domain.value.common import RootValueObject
from blog.util.slug import slugify, truncate_slug

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

ARTICLE_SUMMARY_MAX_LENGTH = 280
ARTICLE_SLUG_MAX_LENGTH = 250
TAG_SLUG_MAX_LENGTH = 80


# Rules


def require_not_empty(value: str, label: str) -> str:
    if not value:
        raise ValueError(f"{label} must not be empty")
    return value


def require_length(
    value: str,
    label: str,
    min_length: int | None = None,
    max_length: int | None = None,
) -> str:
    if min_length is not None and len(value) < min_length:
        raise ValueError(f"{label} must be at least {min_length} characters")
    if max_length is not None and len(value) > max_length:
        raise ValueError(f"{label} must be at most {max_length} characters")
    return value


def require_slug_format(value: str, label: str) -> str:
    if not SLUG_PATTERN.match(value):
        raise ValueError(
            f"{label} must contain only lowercase letters, digits and single "
            "hyphens, with no leading or trailing hyphen"
        )
    return value


def trimmed_text(value: str, label: str, min_length: int, max_length: int | None) -> str:
    """Trim, then enforce non-emptiness and length bounds."""
    value = require_not_empty(value.strip(), label)
    return require_length(value, label, min_length=min_length, max_length=max_length)


# Identifiers and accounts


class Uuid(RootValueObject[str]):
    """Version-4 UUID in its canonical 8-4-4-4-12 string form.

    Used as the identifier of every entity.
    """

    @field_validator("root")
    @classmethod
    def validate_uuid(cls, v: str) -> str:
        """Validate UUID v4 format."""
        require_not_empty(v, "UUID")
        if not UUID_V4_PATTERN.match(v):
            raise ValueError("UUID must be a valid version 4 UUID")
        return v

    @classmethod
    def generate(cls) -> "Uuid":
        """Generate a fresh random identifier."""
        return cls(str(uuid4()))


class Email(RootValueObject[str]):
    """Email address. Equality ignores case."""

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email is non-empty, at most 320 characters and well formed."""
        require_not_empty(v, "Email")
        require_length(v, "Email", max_length=320)
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Email must have a valid format")
        return v

    def equals(self, other: "RootValueObject[str]") -> bool:
        """Compare case-insensitively."""
        return isinstance(other, Email) and self.root.lower() == other.root.lower()


class DisplayName(RootValueObject[str]):
    """Name shown for a user. Trimmed, 2-100 characters."""

    @field_validator("root")
    @classmethod
    def validate_display_name(cls, v: str) -> str:
        return trimmed_text(v, "Display name", 2, 100)


class PasswordHash(RootValueObject[str]):
    """Opaque password hash produced by the password hasher."""

    @field_validator("root")
    @classmethod
    def validate_hash(cls, v: str) -> str:
        return require_not_empty(v, "Password hash")


class AccessToken(RootValueObject[str]):
    """Opaque signed access token."""

    @field_validator("root")
    @classmethod
    def validate_token(cls, v: str) -> str:
        return require_not_empty(v, "Access token")


# Articles


class ArticleTitle(RootValueObject[str]):
    """Article title. Trimmed, 5-200 characters."""

    @field_validator("root")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return trimmed_text(v, "Article title", 5, 200)


class ArticleContent(RootValueObject[str]):
    """Article body. Trimmed, at least 50 characters."""

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return trimmed_text(v, "Article content", 50, None)


class ArticleSummary(RootValueObject[Optional[str]]):
    """Optional article summary.

    Wraps None when the article has no summary. A given string is trimmed
    and limited to 280 characters; blank strings count as absent.
    """

    @field_validator("root")
    @classmethod
    def validate_summary(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        return require_length(
            v, "Article summary", max_length=ARTICLE_SUMMARY_MAX_LENGTH
        )

    @classmethod
    def absent(cls) -> "ArticleSummary":
        return cls(None)

    @classmethod
    def from_content(cls, content: "ArticleContent") -> "ArticleSummary":
        """Derive a summary from the first 280 characters of the content."""
        return cls.create(content.root[:ARTICLE_SUMMARY_MAX_LENGTH])

    @property
    def is_present(self) -> bool:
        return self.root is not None

    def __str__(self) -> str:
        return self.root or ""


class ArticleSlug(RootValueObject[str]):
    """URL-safe article slug.

    Must already be slugified: lowercase alphanumeric words joined by single
    hyphens, at most 250 characters. Examples: 'clean-architecture-in-python'
    """

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        require_not_empty(v, "Article slug")
        require_length(v, "Article slug", max_length=ARTICLE_SLUG_MAX_LENGTH)
        return require_slug_format(v, "Article slug")

    @classmethod
    def from_title(cls, title: ArticleTitle) -> "ArticleSlug":
        """Derive a slug from an article title.

        Raises:
            ValidationError: If the title has no characters usable in a slug
        """
        return cls.create(truncate_slug(slugify(title.root), ARTICLE_SLUG_MAX_LENGTH))


# Tags


class TagName(RootValueObject[str]):
    """Human-readable tag name. Trimmed, 2-60 characters."""

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        return trimmed_text(v, "Tag name", 2, 60)


class TagSlug(RootValueObject[str]):
    """URL-safe tag slug, at most 80 characters. Examples: 'machine-learning'"""

    @field_validator("root")
    @classmethod
    def validate_tag_slug(cls, v: str) -> str:
        require_not_empty(v, "Tag slug")
        require_length(v, "Tag slug", max_length=TAG_SLUG_MAX_LENGTH)
        return require_slug_format(v, "Tag slug")

    @classmethod
    def from_name(cls, name: TagName) -> "TagSlug":
        """Derive a slug from a tag name."""
        return cls.create(truncate_slug(slugify(name.root), TAG_SLUG_MAX_LENGTH))


# Comments


class CommentContent(RootValueObject[str]):
    """Comment body. Trimmed, 1-1000 characters."""

    @field_validator("root")
    @classmethod
    def validate_comment_content(cls, v: str) -> str:
        return trimmed_text(v, "Comment content", 1, 1000)
