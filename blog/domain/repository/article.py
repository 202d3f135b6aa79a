"""Article repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from blog.domain.model.article import Article
from blog.domain.value import ArticleSlug, ArticleTitle, Uuid


@dataclass(frozen=True)
class ArticleFilters:
    """Filters for article listings.

    Attributes:
        search: Slugified search term, matched as a substring of the slug
        tag_slugs: Slugified tag terms; keep articles carrying at least one
        author_id: Keep articles by this author only
        include_deleted: Whether to include soft-deleted articles
    """

    search: Optional[str] = None
    tag_slugs: list[str] = field(default_factory=list)
    author_id: Optional[Uuid] = None
    include_deleted: bool = False


@dataclass
class ArticleListResult:
    """One window of matching articles plus the total match count."""

    articles: list[Article]
    total: int


class ArticleRepository(ABC):
    """Repository for the Article aggregate.

    Defines the contract for article persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, article_id: Uuid, include_deleted: bool = False
    ) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier
            include_deleted: Whether a soft-deleted article may be returned

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(
        self, slug: ArticleSlug, include_deleted: bool = False
    ) -> Optional[Article]:
        """Find an article by slug.

        Args:
            slug: The article slug
            include_deleted: Whether a soft-deleted article may be returned

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: ArticleSlug) -> bool:
        """Check whether a slug is taken, including by deleted articles.

        Args:
            slug: The slug to check

        Returns:
            True if any article uses the slug
        """
        pass

    @abstractmethod
    async def exists_for_author(self, author_id: Uuid, title: ArticleTitle) -> bool:
        """Check whether an author already has a live article with this title.

        Args:
            author_id: Author user ID
            title: Article title (compared exactly)

        Returns:
            True if a matching non-deleted article exists
        """
        pass

    @abstractmethod
    async def find_many(
        self, filters: ArticleFilters, limit: int = 10, offset: int = 0
    ) -> ArticleListResult:
        """Find articles with filtering and pagination, newest first.

        Args:
            filters: Listing filters
            limit: Maximum number of articles to return
            offset: Number of articles to skip

        Returns:
            The requested window plus the total number of matches
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        Args:
            article: The article to save

        Returns:
            The saved article
        """
        pass

    @abstractmethod
    async def delete(self, article_id: Uuid) -> None:
        """Delete an article (hard delete).

        Note: In practice, we use soft deletes via Article.soft_delete()

        Args:
            article_id: The article ID to delete
        """
        pass
