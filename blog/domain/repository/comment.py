"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CursorPage, CursorPagination, Uuid


class CommentRepository(ABC):
    """Repository for Comment entities.

    Listings are cursor paginated and never include soft-deleted comments.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: Uuid, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            include_deleted: Whether a soft-deleted comment may be returned

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level_by_article(
        self, article_id: Uuid, pagination: CursorPagination
    ) -> CursorPage[Comment]:
        """Find top-level comments of an article, newest first.

        Args:
            article_id: Article ID
            pagination: Page size and optional cursor

        Returns:
            One page of comments with the cursor of the next page
        """
        pass

    @abstractmethod
    async def find_replies(
        self, parent_id: Uuid, pagination: CursorPagination
    ) -> CursorPage[Comment]:
        """Find replies to a comment, oldest first.

        Args:
            parent_id: Parent comment ID
            pagination: Page size and optional cursor

        Returns:
            One page of replies with the cursor of the next page
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: Uuid) -> None:
        """Delete a comment (hard delete).

        Args:
            comment_id: The comment ID to delete
        """
        pass
