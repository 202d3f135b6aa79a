"""Get article use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, model_validator

from blog.application.mappers import ArticleItem, UserItem, to_article_item, to_user_item
from blog.application.usecase.base import BaseUseCase
from blog.domain.error import NotFoundError
from blog.domain.service import ArticleService, UserService
from blog.domain.value import ArticleSlug, Uuid


class GetArticleRequest(BaseModel):
    """Get article request. Exactly one of article_id and slug is set."""

    article_id: Optional[str] = None
    slug: Optional[str] = None

    @model_validator(mode="after")
    def check_one_key(self) -> "GetArticleRequest":
        if (self.article_id is None) == (self.slug is None):
            raise ValueError("Provide exactly one of article_id or slug")
        return self


class GetArticleResponse(BaseModel):
    """Get article response."""

    article: ArticleItem
    author: Optional[UserItem] = None


class GetArticleUseCase(BaseUseCase):
    """Use case for reading one live article."""

    def __init__(
        self, article_service: ArticleService, user_service: UserService
    ) -> None:
        """Initialize get article use case.

        Args:
            article_service: Article domain service
            user_service: User domain service
        """
        self.article_service = article_service
        self.user_service = user_service

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Execute get article flow.

        Args:
            request: Article ID or slug

        Returns:
            The article and its author

        Raises:
            ValidationError: If the ID or slug is malformed
            NotFoundError: If no live article matches
        """
        with logfire.span(
            "get_article.execute", article_id=request.article_id, slug=request.slug
        ):
            if request.article_id is not None:
                article = await self.article_service.get_article(
                    Uuid.create(request.article_id)
                )
            else:
                article = await self.article_service.get_article_by_slug(
                    ArticleSlug.create(request.slug)
                )

            try:
                author = to_user_item(
                    await self.user_service.get_by_id(article.author_id)
                )
            except NotFoundError:
                author = None

            return GetArticleResponse(article=to_article_item(article), author=author)
