"""Create comment use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.mappers import CommentItem, to_comment_item
from blog.application.usecase.base import BaseUseCase
from blog.domain.service import ArticleService, CommentService, UserService
from blog.domain.value import CommentContent, Uuid


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: str
    author_id: str  # User ID from authenticated user
    content: str
    parent_id: Optional[str] = None  # Set to reply to a top-level comment


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on an article or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate IDs and content
        2. Load the article and the author (both must exist)
        3. Load the parent comment when replying
        4. Create the comment (via CommentService, which enforces threading)

        Args:
            request: Create comment request

        Returns:
            Created comment with its author

        Raises:
            ValidationError: If an ID or the content is invalid
            NotFoundError: If the article, author or parent is missing or deleted
            StructuralConstraintError: If the parent is a reply or belongs
                to another article
        """
        article_id = Uuid.create(request.article_id)
        author_id = Uuid.create(request.author_id)
        content = CommentContent.create(request.content)
        parent_id = Uuid.create(request.parent_id) if request.parent_id else None

        with logfire.span(
            "create_comment.execute",
            article_id=str(article_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            await self.article_service.get_article(article_id)  # Raises NotFoundError
            author = await self.user_service.get_by_id(author_id)

            parent = (
                await self.comment_service.get_comment(parent_id) if parent_id else None
            )

            comment = await self.comment_service.create_comment(
                article_id=article_id,
                author_id=author_id,
                content=content,
                parent=parent,
            )

            return CreateCommentResponse(
                comment=to_comment_item(comment, {author.id.root: author})
            )
