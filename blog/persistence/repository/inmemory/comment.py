"""In-memory comment repository for testing."""

from copy import deepcopy
from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CursorPage, CursorPagination, Uuid


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[str, Comment] = {}

    async def find_by_id(
        self, comment_id: Uuid, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id.root)
        if comment is None or (comment.is_deleted and not include_deleted):
            return None
        return deepcopy(comment)

    async def find_top_level_by_article(
        self, article_id: Uuid, pagination: CursorPagination
    ) -> CursorPage[Comment]:
        """Find top-level comments of an article, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.article_id.root == article_id.root
            and c.parent_id is None
            and not c.is_deleted
        ]
        comments.sort(key=lambda c: (c.created_at, c.id.root), reverse=True)

        cursor = pagination.cursor
        if cursor is not None:
            comments = [
                c for c in comments if cursor.admits_descending(c.created_at, c.id.root)
            ]

        rows = [deepcopy(c) for c in comments[: pagination.fetch_size]]
        return CursorPage.from_rows(rows, pagination.size)

    async def find_replies(
        self, parent_id: Uuid, pagination: CursorPagination
    ) -> CursorPage[Comment]:
        """Find replies to a comment, oldest first."""
        replies = [
            c
            for c in self._comments.values()
            if c.parent_id is not None
            and c.parent_id.root == parent_id.root
            and not c.is_deleted
        ]
        replies.sort(key=lambda c: (c.created_at, c.id.root))

        cursor = pagination.cursor
        if cursor is not None:
            replies = [
                c for c in replies if cursor.admits_ascending(c.created_at, c.id.root)
            ]

        rows = [deepcopy(c) for c in replies[: pagination.fetch_size]]
        return CursorPage.from_rows(rows, pagination.size)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id.root] = deepcopy(comment)
        return comment

    async def delete(self, comment_id: Uuid) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id.root, None)
