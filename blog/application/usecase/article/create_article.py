"""Create article use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from blog.application.mappers import ArticleItem, to_article_item
from blog.application.usecase.base import BaseUseCase
from blog.domain.model import Article
from blog.domain.service import ArticleService, TagService, UserService
from blog.domain.value import ArticleContent, ArticleSummary, ArticleTitle, Uuid


class CreateArticleRequest(BaseModel):
    """Create article request."""

    author_id: str  # User ID from authenticated user
    title: str
    content: str
    cover_image_url: Optional[str] = None
    tags: list[str] = Field(default_factory=list)  # Tag names or slugs
    summary: Optional[str] = None  # Derived from content when omitted


class CreateArticleResponse(BaseModel):
    """Create article response."""

    article: ArticleItem


class CreateArticleUseCase(BaseUseCase):
    """Use case for publishing a new article."""

    def __init__(
        self,
        article_service: ArticleService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize create article use case.

        Args:
            article_service: Article domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.article_service = article_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: CreateArticleRequest) -> CreateArticleResponse:
        """Execute create article flow.

        Steps:
        1. Validate the raw input into value objects
        2. Load the author (via UserService)
        3. Resolve tags, creating missing ones (via TagService)
        4. Generate a unique slug from the title (via ArticleService)
        5. Create and save the Article entity

        Args:
            request: Create article request

        Returns:
            Created article

        Raises:
            ValidationError: If any field is invalid
            NotFoundError: If the author does not exist
        """
        author_id = Uuid.create(request.author_id)
        title = ArticleTitle.create(request.title)
        content = ArticleContent.create(request.content)
        summary = (
            ArticleSummary.create(request.summary)
            if request.summary is not None
            else None
        )

        await self.user_service.get_by_id(author_id)  # Raises NotFoundError

        with logfire.span(
            "create_article.execute",
            title=title.root,
            tags=request.tags,
            author_id=str(author_id),
        ):
            tags = await self.tag_service.resolve_tags(request.tags)

            article_id = Uuid.generate()
            slug = await self.article_service.generate_unique_slug(title, article_id)

            article = Article.create(
                id=article_id,
                author_id=author_id,
                title=title,
                content=content,
                cover_image_url=request.cover_image_url or None,
                tags=tags,
                slug=slug,
                # A blank explicit summary still falls back to the derived one
                summary=summary if summary and summary.is_present else None,
            )

            saved = await self.article_service.save_article(article)

            logfire.info(
                "Article created successfully",
                article_id=str(saved.id),
                slug=str(saved.slug),
            )
            return CreateArticleResponse(article=to_article_item(saved))
