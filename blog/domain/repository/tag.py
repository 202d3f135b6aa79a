"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.tag import Tag
from blog.domain.value import TagSlug


class TagRepository(ABC):
    """Repository for Tag entities."""

    @abstractmethod
    async def find_by_slug(self, slug: TagSlug) -> Optional[Tag]:
        """Find a tag by slug.

        Args:
            slug: Tag slug

        Returns:
            The tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slugs(self, slugs: list[TagSlug]) -> list[Tag]:
        """Find several tags at once.

        Args:
            slugs: Tag slugs

        Returns:
            The tags found, in no particular order
        """
        pass

    @abstractmethod
    async def find_all(self, active_only: bool = True) -> list[Tag]:
        """Find all tags ordered by name.

        Args:
            active_only: Whether to leave out inactive tags

        Returns:
            Tags ordered by name
        """
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save a tag (create or update).

        Args:
            tag: The tag to save

        Returns:
            The saved tag
        """
        pass

    @abstractmethod
    async def delete(self, slug: TagSlug) -> None:
        """Delete a tag.

        Args:
            slug: Slug of the tag to delete
        """
        pass
