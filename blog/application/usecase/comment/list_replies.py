"""List replies use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.mappers import CommentItem, to_comment_item
from blog.application.usecase.base import BaseUseCase
from blog.config import PaginationSettings
from blog.domain.service import CommentService, UserService
from blog.domain.value import CursorPageMeta, CursorPagination, Uuid, clamp_page_size


class ListRepliesRequest(BaseModel):
    """List replies request."""

    comment_id: str  # Top-level comment
    size: Optional[int] = None  # Clamped to the configured maximum
    after: Optional[str] = None  # Cursor from a previous page or reply preview


class ListRepliesResponse(BaseModel):
    """List replies response."""

    data: list[CommentItem]
    meta: CursorPageMeta


class ListRepliesUseCase(BaseUseCase):
    """Use case for paging through the replies of a comment, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list replies use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            pagination_settings: Page size defaults and limits
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListRepliesRequest) -> ListRepliesResponse:
        """Execute list replies flow.

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If the comment is missing or deleted
        """
        comment_id = Uuid.create(request.comment_id)
        pagination = CursorPagination(
            size=clamp_page_size(
                request.size,
                default=self.pagination_settings.default_size,
                maximum=self.pagination_settings.max_size,
            ),
            after=request.after,
        )

        with logfire.span(
            "list_replies.execute", comment_id=str(comment_id), size=pagination.size
        ):
            await self.comment_service.get_comment(comment_id)  # Raises NotFoundError

            page = await self.comment_service.list_replies(comment_id, pagination)
            authors = await self.user_service.get_users_by_ids(
                [r.author_id for r in page.data]
            )

            logfire.info(
                "Replies listed", comment_id=str(comment_id), count=len(page.data)
            )
            return ListRepliesResponse(
                data=[to_comment_item(r, authors) for r in page.data],
                meta=page.meta,
            )
