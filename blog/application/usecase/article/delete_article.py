"""Delete article use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import ArticleService
from blog.domain.value import Uuid


class DeleteArticleRequest(BaseModel):
    """Delete article request."""

    article_id: str
    user_id: str  # Current user ID (must be author)


class DeleteArticleResponse(BaseModel):
    """Delete article response."""

    success: bool
    article_id: str


class DeleteArticleUseCase(BaseUseCase):
    """Use case for soft-deleting an article."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize delete article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: DeleteArticleRequest) -> DeleteArticleResponse:
        """Execute delete article flow.

        The article stays in storage, keeps its slug and can be restored.

        Raises:
            NotFoundError: If the article does not exist or is already deleted
            AuthorizationError: If the user is not the author
        """
        article_id = Uuid.create(request.article_id)
        user_id = Uuid.create(request.user_id)

        with logfire.span(
            "delete_article.execute", article_id=str(article_id), user_id=str(user_id)
        ):
            article = await self.article_service.get_owned_article(article_id, user_id)
            article.soft_delete()
            await self.article_service.save_article(article)

            logfire.info("Article deleted", article_id=str(article_id))
            return DeleteArticleResponse(success=True, article_id=article_id.root)
