"""Update article use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.mappers import ArticleItem, to_article_item
from blog.application.usecase.base import BaseUseCase
from blog.domain.service import ArticleService, TagService
from blog.domain.value import ArticleContent, ArticleSummary, ArticleTitle, Uuid


class UpdateArticleRequest(BaseModel):
    """Update article request.

    Only fields that are explicitly set are changed. For summary and
    cover_image_url an explicit None (or blank string) clears the value.
    """

    article_id: str
    user_id: str  # Current user ID (must be author)
    title: Optional[str] = None
    content: Optional[str] = None
    summary: Optional[str] = None
    cover_image_url: Optional[str] = None
    tags: Optional[list[str]] = None
    regenerate_slug: bool = False  # Re-slug from the (new) title


class UpdateArticleResponse(BaseModel):
    """Update article response."""

    article: ArticleItem


class UpdateArticleUseCase(BaseUseCase):
    """Use case for editing an article."""

    def __init__(self, article_service: ArticleService, tag_service: TagService) -> None:
        """Initialize update article use case.

        Args:
            article_service: Article domain service
            tag_service: Tag domain service
        """
        self.article_service = article_service
        self.tag_service = tag_service

    async def execute(self, request: UpdateArticleRequest) -> UpdateArticleResponse:
        """Execute update article flow.

        The slug is a permalink and stays put when the title changes unless
        regenerate_slug is set. New content re-derives the summary unless a
        summary is given in the same request.

        Args:
            request: Fields to change

        Returns:
            Updated article

        Raises:
            ValidationError: If any given field is invalid
            NotFoundError: If the article does not exist or is deleted
            AuthorizationError: If the user is not the author
        """
        article_id = Uuid.create(request.article_id)
        user_id = Uuid.create(request.user_id)
        fields = request.model_fields_set

        # Validate everything before touching the entity
        title = ArticleTitle.create(request.title) if request.title is not None else None
        content = (
            ArticleContent.create(request.content)
            if request.content is not None
            else None
        )
        summary = (
            ArticleSummary.create(request.summary) if "summary" in fields else None
        )

        with logfire.span(
            "update_article.execute",
            article_id=str(article_id),
            user_id=str(user_id),
            fields=sorted(fields - {"article_id", "user_id"}),
        ):
            article = await self.article_service.get_owned_article(article_id, user_id)

            if title is not None:
                article.update_title(title)

            if content is not None:
                article.update_content(content)

            if summary is not None:
                article.update_summary(summary)
            elif content is not None:
                article.update_summary(ArticleSummary.from_content(content))

            if "cover_image_url" in fields:
                article.update_cover_image(request.cover_image_url or None)

            if request.tags is not None:
                article.update_tags(await self.tag_service.resolve_tags(request.tags))

            if request.regenerate_slug:
                slug = await self.article_service.generate_unique_slug(
                    article.title, article.id, current=article.slug
                )
                if not slug.equals(article.slug):
                    logfire.info(
                        "Article re-slugged",
                        article_id=str(article.id),
                        old_slug=str(article.slug),
                        new_slug=str(slug),
                    )
                    article.update_slug(slug)

            saved = await self.article_service.save_article(article)
            return UpdateArticleResponse(article=to_article_item(saved))
