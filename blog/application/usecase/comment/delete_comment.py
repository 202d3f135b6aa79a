"""Delete comment use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import CommentService
from blog.domain.value import Uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    comment_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment.

    Replies of a deleted top-level comment are left alone; they stay in
    storage and their own listing still works.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist or is already deleted
            AuthorizationError: If the user is not the author
        """
        comment_id = Uuid.create(request.comment_id)
        user_id = Uuid.create(request.user_id)

        await self.comment_service.delete_comment(comment_id, user_id)
        return DeleteCommentResponse(success=True, comment_id=comment_id.root)
