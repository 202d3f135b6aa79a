"""Tag domain service."""

import logfire

from blog.domain.model import ArticleTag, Tag
from blog.domain.repository import TagRepository
from blog.domain.value import TagName, TagSlug

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def resolve_tags(self, names: list[str]) -> list[ArticleTag]:
        """Turn raw tag names into article tags, creating missing tags.

        Names are matched by slug, so "Machine Learning" and
        "machine-learning" resolve to the same tag. Duplicates are dropped
        and the first occurrence keeps its position.

        Args:
            names: Raw tag names or slugs

        Returns:
            Article tags in the given order

        Raises:
            ValidationError: If a name is not a valid tag name
        """
        with logfire.span("tag_service.resolve_tags", tags=names):
            tag_names = [TagName.create(name) for name in names]
            slugs: list[TagSlug] = []
            wanted: dict[str, TagName] = {}
            for name in tag_names:
                slug = TagSlug.from_name(name)
                if slug.root not in wanted:
                    wanted[slug.root] = name
                    slugs.append(slug)

            existing = {t.slug.root: t for t in await self.tag_repository.find_by_slugs(slugs)}

            resolved: list[ArticleTag] = []
            for slug in slugs:
                tag = existing.get(slug.root)
                if tag is None:
                    tag = await self.tag_repository.save(
                        Tag.create(wanted[slug.root], slug=slug)
                    )
                    logfire.info("Tag created", tag_slug=slug.root)
                resolved.append(ArticleTag(slug=tag.slug.root, name=tag.name.root))

            logfire.info("Tags resolved", count=len(resolved))
            return resolved

    async def ensure_tag(self, name: TagName) -> Tag:
        """Get the tag with this name's slug, creating it if missing."""
        with logfire.span("tag_service.ensure_tag", tag_name=name.root):
            slug = TagSlug.from_name(name)
            tag = await self.tag_repository.find_by_slug(slug)
            if tag is None:
                tag = await self.tag_repository.save(Tag.create(name, slug=slug))
                logfire.info("Tag created", tag_slug=slug.root)
            return tag

    async def get_all_tags(self, active_only: bool = True) -> list[Tag]:
        """Get all tags ordered by name.

        Args:
            active_only: Whether to leave out inactive tags

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags", active_only=active_only):
            tags = await self.tag_repository.find_all(active_only=active_only)
            logfire.info("Tags retrieved", count=len(tags))
            return tags
