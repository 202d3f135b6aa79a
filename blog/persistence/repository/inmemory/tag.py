"""In-memory tag repository for testing."""

from copy import deepcopy
from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.repository.tag import TagRepository
from blog.domain.value import TagSlug


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        self._tags: dict[str, Tag] = {}

    async def find_by_slug(self, slug: TagSlug) -> Optional[Tag]:
        """Find a tag by slug."""
        tag = self._tags.get(slug.root)
        return deepcopy(tag) if tag else None

    async def find_by_slugs(self, slugs: list[TagSlug]) -> list[Tag]:
        """Find several tags at once."""
        wanted = {slug.root for slug in slugs}
        return [deepcopy(t) for key, t in self._tags.items() if key in wanted]

    async def find_all(self, active_only: bool = True) -> list[Tag]:
        """Find all tags ordered by name."""
        tags = [t for t in self._tags.values() if t.active or not active_only]
        tags.sort(key=lambda t: t.name.root)
        return [deepcopy(t) for t in tags]

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._tags[tag.slug.root] = deepcopy(tag)
        return deepcopy(tag)

    async def delete(self, slug: TagSlug) -> None:
        """Delete a tag."""
        self._tags.pop(slug.root, None)
