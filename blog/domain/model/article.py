"""Article aggregate root.

Articles are created through ``Article.create``, which derives the slug from
the title and the summary from the content, and loaded back through
``Article.reconstitute``, which trusts persisted values and derives nothing.
"""

from typing import Optional

from pydantic import AwareDatetime, Field

from blog.domain.model.common import DomainModel, next_timestamp, utc_now
from blog.domain.value import (
    ArticleContent,
    ArticleSlug,
    ArticleSummary,
    ArticleTitle,
    Uuid,
)
from blog.domain.value.common import ValueObject


class ArticleTag(ValueObject):
    """Tag attached to an article, as shown next to it."""

    slug: str
    name: str


class Article(DomainModel):
    """Article aggregate root.

    Mutators never cascade: changing the title keeps the slug and changing
    the content keeps the summary. Callers decide when to re-derive them.
    """

    id: Uuid
    author_id: Uuid
    title: ArticleTitle
    slug: ArticleSlug
    summary: ArticleSummary = Field(default_factory=ArticleSummary.absent)
    content: ArticleContent
    cover_image_url: Optional[str] = None
    is_deleted: bool = False
    tags: list[ArticleTag] = Field(default_factory=list)  # Display order
    created_at: AwareDatetime
    updated_at: AwareDatetime

    @classmethod
    def create(
        cls,
        author_id: Uuid,
        title: ArticleTitle,
        content: ArticleContent,
        cover_image_url: Optional[str] = None,
        tags: Optional[list[ArticleTag]] = None,
        slug: Optional[ArticleSlug] = None,
        summary: Optional[ArticleSummary] = None,
        id: Optional[Uuid] = None,
    ) -> "Article":
        """Create a new article.

        Args:
            author_id: Author user ID
            title: Article title
            content: Article body
            cover_image_url: Optional cover image
            tags: Tags in display order
            slug: Explicit slug (derived from the title when omitted)
            summary: Explicit summary (first 280 characters of the content
                when omitted)
            id: Explicit identifier (generated when omitted)

        Returns:
            New article, not deleted, with created_at == updated_at

        Raises:
            ValidationError: If the slug must be derived and the title has
                no characters usable in a slug
        """
        now = utc_now()
        return cls(
            id=id or Uuid.generate(),
            author_id=author_id,
            title=title,
            slug=slug or ArticleSlug.from_title(title),
            summary=summary or ArticleSummary.from_content(content),
            content=content,
            cover_image_url=cover_image_url,
            is_deleted=False,
            tags=list(tags or []),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def reconstitute(
        cls,
        id: Uuid,
        author_id: Uuid,
        title: ArticleTitle,
        slug: ArticleSlug,
        summary: ArticleSummary,
        content: ArticleContent,
        cover_image_url: Optional[str],
        is_deleted: bool,
        tags: list[ArticleTag],
        created_at: AwareDatetime,
        updated_at: AwareDatetime,
    ) -> "Article":
        """Rebuild an article from persisted state, deriving nothing."""
        return cls(
            id=id,
            author_id=author_id,
            title=title,
            slug=slug,
            summary=summary,
            content=content,
            cover_image_url=cover_image_url,
            is_deleted=is_deleted,
            tags=list(tags),
            created_at=created_at,
            updated_at=updated_at,
        )

    def is_authored_by(self, user_id: Uuid) -> bool:
        return self.author_id.equals(user_id)

    def update_title(self, title: ArticleTitle) -> None:
        self.title = title
        self._touch()

    def update_content(self, content: ArticleContent) -> None:
        self.content = content
        self._touch()

    def update_summary(self, summary: Optional[ArticleSummary]) -> None:
        """Replace the summary; None clears it."""
        self.summary = summary or ArticleSummary.absent()
        self._touch()

    def update_cover_image(self, cover_image_url: Optional[str]) -> None:
        self.cover_image_url = cover_image_url
        self._touch()

    def update_slug(self, slug: ArticleSlug) -> None:
        self.slug = slug
        self._touch()

    def update_tags(self, tags: list[ArticleTag]) -> None:
        self.tags = list(tags)
        self._touch()

    def soft_delete(self) -> None:
        """Mark as deleted without removing it from storage."""
        self.is_deleted = True
        self._touch()

    def restore(self) -> None:
        self.is_deleted = False
        self._touch()

    def _touch(self) -> None:
        self.updated_at = next_timestamp(self.updated_at)
