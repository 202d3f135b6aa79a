"""In-memory article repository for testing."""

from copy import deepcopy
from typing import Optional

from blog.domain.model.article import Article
from blog.domain.repository.article import (
    ArticleFilters,
    ArticleListResult,
    ArticleRepository,
)
from blog.domain.value import ArticleSlug, ArticleTitle, Uuid


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[str, Article] = {}

    async def find_by_id(
        self, article_id: Uuid, include_deleted: bool = False
    ) -> Optional[Article]:
        """Find an article by ID."""
        article = self._articles.get(article_id.root)
        if article is None or (article.is_deleted and not include_deleted):
            return None
        return deepcopy(article)

    async def find_by_slug(
        self, slug: ArticleSlug, include_deleted: bool = False
    ) -> Optional[Article]:
        """Find an article by slug."""
        for article in self._articles.values():
            if article.slug.root == slug.root:
                if article.is_deleted and not include_deleted:
                    return None
                return deepcopy(article)
        return None

    async def slug_exists(self, slug: ArticleSlug) -> bool:
        """Check if a slug exists (globally - includes deleted articles)."""
        return any(a.slug.root == slug.root for a in self._articles.values())

    async def exists_for_author(self, author_id: Uuid, title: ArticleTitle) -> bool:
        """Check if the author has a live article with this exact title."""
        return any(
            a.author_id.root == author_id.root
            and a.title.root == title.root
            and not a.is_deleted
            for a in self._articles.values()
        )

    async def find_many(
        self, filters: ArticleFilters, limit: int = 10, offset: int = 0
    ) -> ArticleListResult:
        """Find articles with filtering and pagination."""
        articles = list(self._articles.values())

        # Filter deleted
        if not filters.include_deleted:
            articles = [a for a in articles if not a.is_deleted]

        # Filter by author
        if filters.author_id is not None:
            articles = [
                a for a in articles if a.author_id.root == filters.author_id.root
            ]

        # Search
        if filters.search:
            articles = [a for a in articles if filters.search in a.slug.root]

        # Filter by tag (any of)
        if filters.tag_slugs:
            wanted = set(filters.tag_slugs)
            articles = [a for a in articles if any(t.slug in wanted for t in a.tags)]

        # Sort newest first
        articles.sort(key=lambda a: (a.created_at, a.id.root), reverse=True)

        # Paginate
        window = articles[offset : offset + limit]
        return ArticleListResult(
            articles=[deepcopy(a) for a in window], total=len(articles)
        )

    async def save(self, article: Article) -> Article:
        """Save or update an article."""
        self._articles[article.id.root] = deepcopy(article)
        return article

    async def delete(self, article_id: Uuid) -> None:
        """Delete an article."""
        self._articles.pop(article_id.root, None)
