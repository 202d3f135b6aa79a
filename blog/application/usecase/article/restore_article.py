"""Restore article use case."""

import logfire
from pydantic import BaseModel

from blog.application.mappers import ArticleItem, to_article_item
from blog.application.usecase.base import BaseUseCase
from blog.domain.service import ArticleService
from blog.domain.value import Uuid


class RestoreArticleRequest(BaseModel):
    """Restore article request."""

    article_id: str
    user_id: str  # Current user ID (must be author)


class RestoreArticleResponse(BaseModel):
    """Restore article response."""

    article: ArticleItem


class RestoreArticleUseCase(BaseUseCase):
    """Use case for bringing back a soft-deleted article."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize restore article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: RestoreArticleRequest) -> RestoreArticleResponse:
        """Execute restore article flow.

        Restoring an article that is not deleted changes nothing.

        Raises:
            NotFoundError: If the article does not exist
            AuthorizationError: If the user is not the author
        """
        article_id = Uuid.create(request.article_id)
        user_id = Uuid.create(request.user_id)

        with logfire.span(
            "restore_article.execute", article_id=str(article_id), user_id=str(user_id)
        ):
            article = await self.article_service.get_owned_article(
                article_id, user_id, include_deleted=True
            )
            if article.is_deleted:
                article.restore()
                article = await self.article_service.save_article(article)
                logfire.info("Article restored", article_id=str(article_id))

            return RestoreArticleResponse(article=to_article_item(article))
