"""Tag entity for categorizing articles.

Tags are reference data: they are created once (usually by seeding) and
only toggled active/inactive afterwards, so they carry no update timestamp.
"""

from typing import Optional

from pydantic import AwareDatetime

from blog.domain.model.common import DomainModel, utc_now
from blog.domain.value import TagName, TagSlug


class Tag(DomainModel):
    """Tag identified by its slug."""

    slug: TagSlug  # Unique
    name: TagName
    active: bool = True
    created_at: AwareDatetime

    @classmethod
    def create(
        cls, name: TagName, active: bool = True, slug: Optional[TagSlug] = None
    ) -> "Tag":
        """Create a tag, deriving the slug from the name unless given."""
        return cls(
            slug=slug or TagSlug.from_name(name),
            name=name,
            active=active,
            created_at=utc_now(),
        )

    @classmethod
    def reconstitute(
        cls, slug: TagSlug, name: TagName, active: bool, created_at: AwareDatetime
    ) -> "Tag":
        """Rebuild a tag from persisted state."""
        return cls(slug=slug, name=name, active=active, created_at=created_at)

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False
