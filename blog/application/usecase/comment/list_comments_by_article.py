"""List comments by article use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.mappers import (
    CommentWithRepliesItem,
    ReplyPreview,
    to_comment_item,
)
from blog.application.usecase.base import BaseUseCase
from blog.config import PaginationSettings
from blog.domain.model import Comment
from blog.domain.service import ArticleService, CommentService, UserService
from blog.domain.value import (
    CursorPage,
    CursorPageMeta,
    CursorPagination,
    Uuid,
    clamp_page_size,
)


class ListCommentsByArticleRequest(BaseModel):
    """List comments by article request."""

    article_id: str
    size: Optional[int] = None  # Clamped to the configured maximum
    after: Optional[str] = None  # Cursor from a previous page


class ListCommentsByArticleResponse(BaseModel):
    """List comments by article response."""

    data: list[CommentWithRepliesItem]
    meta: CursorPageMeta


class ListCommentsByArticleUseCase(BaseUseCase):
    """Use case for reading an article's comment threads.

    Top-level comments come newest first. Each carries a preview of its
    first replies, oldest first, with a cursor for ListRepliesUseCase.
    """

    def __init__(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list comments by article use case.

        Args:
            comment_service: Comment domain service
            article_service: Article domain service
            user_service: User domain service
            pagination_settings: Page size defaults and limits
        """
        self.comment_service = comment_service
        self.article_service = article_service
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(
        self, request: ListCommentsByArticleRequest
    ) -> ListCommentsByArticleResponse:
        """Execute list comments flow.

        A malformed cursor is treated as no cursor.

        Args:
            request: Article ID, page size and cursor

        Returns:
            One page of top-level comments with reply previews

        Raises:
            ValidationError: If the article ID is malformed
            NotFoundError: If the article is missing or deleted
        """
        article_id = Uuid.create(request.article_id)
        pagination = CursorPagination(
            size=clamp_page_size(
                request.size,
                default=self.pagination_settings.default_size,
                maximum=self.pagination_settings.max_size,
            ),
            after=request.after,
        )

        with logfire.span(
            "list_comments_by_article.execute",
            article_id=str(article_id),
            size=pagination.size,
            has_cursor=request.after is not None,
        ):
            await self.article_service.get_article(article_id)  # Raises NotFoundError

            page = await self.comment_service.list_top_level(article_id, pagination)

            previews: dict[str, CursorPage[Comment]] = {}
            for comment in page.data:
                previews[comment.id.root] = await self._preview_replies(comment)

            # One batch lookup for every author on the page
            author_ids = [c.author_id for c in page.data]
            for preview in previews.values():
                author_ids.extend(r.author_id for r in preview.data)
            authors = await self.user_service.get_users_by_ids(author_ids)

            items = []
            for comment in page.data:
                preview = previews[comment.id.root]
                item = to_comment_item(comment, authors)
                items.append(
                    CommentWithRepliesItem(
                        **item.model_dump(),
                        replies=ReplyPreview(
                            data=[to_comment_item(r, authors) for r in preview.data],
                            meta=preview.meta,
                        ),
                    )
                )

            return ListCommentsByArticleResponse(data=items, meta=page.meta)

    async def _preview_replies(self, comment: Comment) -> CursorPage[Comment]:
        preview_size = self.pagination_settings.reply_preview_size
        if preview_size == 0:
            return CursorPage(data=[])
        return await self.comment_service.list_replies(
            comment.id, CursorPagination(size=preview_size)
        )
