"""Comment entity.

Comments are one level deep: a comment without a parent is a top-level
comment, a comment with a parent is a reply, and replies cannot be replied
to. That rule needs the parent comment loaded, so it is enforced by
CommentService when a comment is created, not by the entity itself.
"""

from typing import Optional

from pydantic import AwareDatetime

from blog.domain.model.common import DomainModel, next_timestamp, utc_now
from blog.domain.value import CommentContent, Uuid


class Comment(DomainModel):
    """Comment on an article, or reply to a top-level comment."""

    id: Uuid
    article_id: Uuid
    parent_id: Optional[Uuid] = None  # None for top-level comments
    author_id: Uuid
    content: CommentContent
    is_deleted: bool = False
    created_at: AwareDatetime
    updated_at: AwareDatetime

    @classmethod
    def create(
        cls,
        article_id: Uuid,
        author_id: Uuid,
        content: CommentContent,
        parent_id: Optional[Uuid] = None,
        id: Optional[Uuid] = None,
    ) -> "Comment":
        """Create a new comment stamped with the current time."""
        now = utc_now()
        return cls(
            id=id or Uuid.generate(),
            article_id=article_id,
            parent_id=parent_id,
            author_id=author_id,
            content=content,
            is_deleted=False,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(
        cls,
        id: Uuid,
        article_id: Uuid,
        parent_id: Optional[Uuid],
        author_id: Uuid,
        content: CommentContent,
        is_deleted: bool,
        created_at: AwareDatetime,
        updated_at: AwareDatetime,
    ) -> "Comment":
        """Rebuild a comment from persisted state."""
        return cls(
            id=id,
            article_id=article_id,
            parent_id=parent_id,
            author_id=author_id,
            content=content,
            is_deleted=is_deleted,
            created_at=created_at,
            updated_at=updated_at,
        )

    def is_reply(self) -> bool:
        return self.parent_id is not None

    def is_authored_by(self, user_id: Uuid) -> bool:
        return self.author_id.equals(user_id)

    def soft_delete(self) -> None:
        self.is_deleted = True
        self._touch()

    def restore(self) -> None:
        self.is_deleted = False
        self._touch()

    def _touch(self) -> None:
        self.updated_at = next_timestamp(self.updated_at)
