"""Comment domain service."""

from typing import Optional

import logfire

from blog.domain.error import AuthorizationError, NotFoundError, StructuralConstraintError
from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentContent, CursorPage, CursorPagination, Uuid

from .base import Service


class CommentService(Service):
    """Domain service for comment operations.

    Owns the threading rule: comments nest one level deep, so a reply
    must target a top-level comment of the same article.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        article_id: Uuid,
        author_id: Uuid,
        content: CommentContent,
        parent: Optional[Comment] = None,
    ) -> Comment:
        """Create a comment on an article or a reply to a top-level comment.

        Args:
            article_id: Article ID
            author_id: Author user ID
            content: Comment content
            parent: Already-loaded parent comment for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            StructuralConstraintError: If the parent is itself a reply or
                belongs to another article
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id),
            author_id=str(author_id),
            parent_id=str(parent.id) if parent else None,
        ):
            if parent is not None:
                self.check_can_reply(parent, article_id)

            comment = Comment.create(
                article_id=article_id,
                author_id=author_id,
                content=content,
                parent_id=parent.id if parent else None,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article_id),
                is_reply=saved.is_reply(),
            )
            return saved

    def check_can_reply(self, parent: Comment, article_id: Uuid) -> None:
        """Check that a reply to ``parent`` on ``article_id`` keeps threads flat.

        Raises:
            StructuralConstraintError: If the rule would be broken
        """
        if parent.is_reply():
            logfire.warn("Reply to a reply rejected", parent_id=str(parent.id))
            raise StructuralConstraintError(
                "Cannot reply to a reply; only top-level comments accept replies"
            )
        if not parent.article_id.equals(article_id):
            logfire.warn(
                "Parent comment does not belong to article",
                parent_id=str(parent.id),
                parent_article_id=str(parent.article_id),
                target_article_id=str(article_id),
            )
            raise StructuralConstraintError(
                "Parent comment must belong to the same article"
            )

    async def get_comment(self, comment_id: Uuid) -> Comment:
        """Get a live comment by ID.

        Raises:
            NotFoundError: If the comment does not exist or is deleted
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def delete_comment(self, comment_id: Uuid, user_id: Uuid) -> Comment:
        """Soft-delete a comment owned by the user.

        Args:
            comment_id: Comment ID
            user_id: Acting user ID

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment does not exist or is already deleted
            AuthorizationError: If the user is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.get_comment(comment_id)
            if not comment.is_authored_by(user_id):
                logfire.warn(
                    "Comment deletion denied",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise AuthorizationError("comment", str(comment_id), str(user_id))

            comment.soft_delete()
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return saved

    async def list_top_level(
        self, article_id: Uuid, pagination: CursorPagination
    ) -> CursorPage[Comment]:
        """List top-level comments of an article, newest first."""
        with logfire.span(
            "comment_service.list_top_level",
            article_id=str(article_id),
            size=pagination.size,
        ):
            page = await self.comment_repository.find_top_level_by_article(
                article_id, pagination
            )
            logfire.info(
                "Top-level comments retrieved",
                article_id=str(article_id),
                count=len(page.data),
                has_next=page.meta.next_cursor is not None,
            )
            return page

    async def list_replies(
        self, parent_id: Uuid, pagination: CursorPagination
    ) -> CursorPage[Comment]:
        """List replies to a comment, oldest first."""
        with logfire.span(
            "comment_service.list_replies",
            parent_id=str(parent_id),
            size=pagination.size,
        ):
            return await self.comment_repository.find_replies(parent_id, pagination)
