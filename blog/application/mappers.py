"""Response items shared by use cases, and the mappers that build them."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from blog.domain.model import Article, Comment, Tag, User
from blog.domain.value import CursorPageMeta


class UserItem(BaseModel):
    """Public view of a user."""

    id: str
    email: str
    display_name: str
    avatar_url: Optional[str] = None


class ArticleTagItem(BaseModel):
    """Tag shown on an article."""

    slug: str
    name: str


class ArticleItem(BaseModel):
    """Article in responses."""

    id: str
    author_id: str
    title: str
    slug: str
    summary: Optional[str] = None
    content: str
    cover_image_url: Optional[str] = None
    tags: list[ArticleTagItem]
    created_at: datetime
    updated_at: datetime


class CommentItem(BaseModel):
    """Comment in responses.

    author is None only when the author account no longer exists.
    """

    id: str
    article_id: str
    parent_id: Optional[str] = None
    author: Optional[UserItem] = None
    content: str
    created_at: datetime
    updated_at: datetime


class ReplyPreview(BaseModel):
    """First replies of a top-level comment plus the cursor to load more."""

    data: list[CommentItem]
    meta: CursorPageMeta


class CommentWithRepliesItem(CommentItem):
    """Top-level comment with a preview of its replies."""

    replies: ReplyPreview


class TagItem(BaseModel):
    """Tag in responses."""

    slug: str
    name: str
    active: bool
    created_at: datetime


def to_user_item(user: User) -> UserItem:
    return UserItem(
        id=user.id.root,
        email=user.email.root,
        display_name=user.display_name.root,
        avatar_url=user.avatar_url,
    )


def to_article_item(article: Article) -> ArticleItem:
    return ArticleItem(
        id=article.id.root,
        author_id=article.author_id.root,
        title=article.title.root,
        slug=article.slug.root,
        summary=article.summary.root,
        content=article.content.root,
        cover_image_url=article.cover_image_url,
        tags=[ArticleTagItem(slug=t.slug, name=t.name) for t in article.tags],
        created_at=article.created_at,
        updated_at=article.updated_at,
    )


def to_comment_item(comment: Comment, authors: dict[str, User]) -> CommentItem:
    """Map a comment, attaching its author from a preloaded lookup."""
    author = authors.get(comment.author_id.root)
    return CommentItem(
        id=comment.id.root,
        article_id=comment.article_id.root,
        parent_id=comment.parent_id.root if comment.parent_id else None,
        author=to_user_item(author) if author else None,
        content=comment.content.root,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def to_tag_item(tag: Tag) -> TagItem:
    return TagItem(
        slug=tag.slug.root,
        name=tag.name.root,
        active=tag.active,
        created_at=tag.created_at,
    )
