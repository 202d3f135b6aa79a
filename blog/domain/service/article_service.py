"""Article domain service."""

from typing import Optional

import logfire

from blog.domain.error import AuthorizationError, NotFoundError
from blog.domain.model import Article
from blog.domain.repository import ArticleRepository
from blog.domain.value import ArticleSlug, ArticleTitle, Uuid
from blog.domain.value.types import ARTICLE_SLUG_MAX_LENGTH
from blog.util.slug import slugify, truncate_slug

from .base import Service


class ArticleService(Service):
    """Domain service for article operations."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def save_article(self, article: Article) -> Article:
        """Save an article.

        Args:
            article: Article to save

        Returns:
            Saved article
        """
        with logfire.span(
            "article_service.save_article",
            article_id=str(article.id),
            slug=str(article.slug),
        ):
            saved = await self.article_repository.save(article)
            logfire.info("Article saved", article_id=str(saved.id))
            return saved

    async def get_article(
        self, article_id: Uuid, include_deleted: bool = False
    ) -> Article:
        """Get an article by ID.

        Args:
            article_id: Article ID
            include_deleted: Whether a soft-deleted article may be returned

        Returns:
            The article

        Raises:
            NotFoundError: If the article does not exist or is deleted
        """
        with logfire.span("article_service.get_article", article_id=str(article_id)):
            article = await self.article_repository.find_by_id(
                article_id, include_deleted=include_deleted
            )
            if article is None:
                logfire.warn("Article not found", article_id=str(article_id))
                raise NotFoundError("Article", str(article_id))
            return article

    async def get_article_by_slug(self, slug: ArticleSlug) -> Article:
        """Get a live article by slug.

        Args:
            slug: Article slug

        Returns:
            The article

        Raises:
            NotFoundError: If no live article has this slug
        """
        with logfire.span("article_service.get_article_by_slug", slug=str(slug)):
            article = await self.article_repository.find_by_slug(slug)
            if article is None:
                logfire.warn("Article not found by slug", slug=str(slug))
                raise NotFoundError("Article", str(slug))
            return article

    async def get_owned_article(
        self, article_id: Uuid, user_id: Uuid, include_deleted: bool = False
    ) -> Article:
        """Get an article the user is allowed to modify.

        Args:
            article_id: Article ID
            user_id: Acting user ID
            include_deleted: Whether a soft-deleted article may be returned

        Returns:
            The article

        Raises:
            NotFoundError: If the article does not exist or is deleted
            AuthorizationError: If the user is not the author
        """
        article = await self.get_article(article_id, include_deleted=include_deleted)
        if not article.is_authored_by(user_id):
            logfire.warn(
                "Article modification denied",
                article_id=str(article_id),
                user_id=str(user_id),
            )
            raise AuthorizationError("article", str(article_id), str(user_id))
        return article

    async def exists_for_author(self, author_id: Uuid, title: ArticleTitle) -> bool:
        """Check whether the author already has a live article with this title."""
        return await self.article_repository.exists_for_author(author_id, title)

    async def generate_unique_slug(
        self,
        title: ArticleTitle,
        article_id: Uuid,
        current: Optional[ArticleSlug] = None,
    ) -> ArticleSlug:
        """Generate a unique slug from a title.

        Handles collisions by appending numeric suffixes. Slugs of deleted
        articles count as taken.

        Args:
            title: Article title to slugify
            article_id: Article ID (used for fallback if title produces empty slug)
            current: The article's own slug, which never counts as a collision

        Returns:
            Unique slug for the article
        """
        with logfire.span(
            "article_service.generate_unique_slug",
            article_id=str(article_id),
            title=title.root,
        ):
            base_slug = truncate_slug(slugify(title.root), ARTICLE_SLUG_MAX_LENGTH)

            # Fallback for titles without a single letter or digit
            if not base_slug:
                fallback = f"article-{article_id.root.replace('-', '')[:8].lower()}"
                logfire.info(
                    "Using fallback slug for title",
                    article_id=str(article_id),
                    slug=fallback,
                )
                base_slug = fallback

            candidate = base_slug
            counter = 1
            while await self._is_taken(candidate, current):
                suffix = f"-{counter}"
                # Ensure we don't exceed the slug limit with suffix
                candidate = (
                    truncate_slug(base_slug, ARTICLE_SLUG_MAX_LENGTH - len(suffix))
                    + suffix
                )
                counter += 1
                logfire.debug(
                    "Slug collision, trying with suffix",
                    base_slug=base_slug,
                    attempt=candidate,
                )

            slug = ArticleSlug.create(candidate)
            logfire.info(
                "Generated unique slug",
                article_id=str(article_id),
                slug=str(slug),
                had_collision=counter > 1,
            )
            return slug

    async def _is_taken(self, candidate: str, current: Optional[ArticleSlug]) -> bool:
        if current is not None and current.root == candidate:
            return False
        return await self.article_repository.slug_exists(ArticleSlug.create(candidate))
