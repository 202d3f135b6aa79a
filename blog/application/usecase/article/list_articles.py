"""List articles use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from blog.application.mappers import ArticleItem, to_article_item
from blog.application.usecase.base import BaseUseCase
from blog.config import PaginationSettings
from blog.domain.repository import ArticleFilters, ArticleRepository
from blog.domain.value import OffsetPageMeta, OffsetPagination, clamp_page_size
from blog.util.slug import slugify


class ListArticlesRequest(BaseModel):
    """List articles request."""

    page: int = Field(default=1, ge=1)
    size: Optional[int] = None  # Clamped to the configured maximum
    search: Optional[str] = None  # Matched against slugs after slugifying
    tags: list[str] = Field(default_factory=list)  # Tag slugs (any of)


class ListArticlesResponse(BaseModel):
    """List articles response."""

    data: list[ArticleItem]
    meta: OffsetPageMeta


class ListArticlesUseCase(BaseUseCase):
    """Use case for browsing live articles, newest first."""

    def __init__(
        self,
        article_repository: ArticleRepository,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list articles use case.

        Args:
            article_repository: Article repository
            pagination_settings: Page size defaults and limits
        """
        self.article_repository = article_repository
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        """Execute list articles flow.

        A search term with no letters or digits is ignored rather than
        matching nothing.

        Args:
            request: Page, size and filters

        Returns:
            One page of articles with page metadata
        """
        pagination = OffsetPagination(
            page=request.page,
            size=clamp_page_size(
                request.size,
                default=self.pagination_settings.default_size,
                maximum=self.pagination_settings.max_size,
            ),
        )

        # Normalise the search term the same way slugs are built
        search = slugify(request.search) if request.search else ""
        tag_slugs = [s for s in map(slugify, request.tags) if s]

        with logfire.span(
            "list_articles.execute",
            page=pagination.page,
            size=pagination.size,
            search=search or None,
            tags=tag_slugs,
        ):
            result = await self.article_repository.find_many(
                ArticleFilters(search=search or None, tag_slugs=tag_slugs),
                limit=pagination.limit,
                offset=pagination.offset,
            )

            logfire.info(
                "Articles listed", count=len(result.articles), total=result.total
            )

            return ListArticlesResponse(
                data=[to_article_item(a) for a in result.articles],
                meta=OffsetPageMeta.create(
                    pagination.page, pagination.size, result.total
                ),
            )
