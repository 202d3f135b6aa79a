"""Domain value objects for the blog."""

from blog.domain.value.pagination import (
    Cursor,
    CursorPage,
    CursorPageMeta,
    CursorPagination,
    OffsetPage,
    OffsetPageMeta,
    OffsetPagination,
    clamp_page_size,
    decode_cursor,
    encode_cursor,
)
from blog.domain.value.types import (
    AccessToken,
    ArticleContent,
    ArticleSlug,
    ArticleSummary,
    ArticleTitle,
    CommentContent,
    DisplayName,
    Email,
    PasswordHash,
    TagName,
    TagSlug,
    Uuid,
)

__all__ = [
    # Identifiers and accounts
    "Uuid",
    "Email",
    "DisplayName",
    "PasswordHash",
    "AccessToken",
    # Articles
    "ArticleTitle",
    "ArticleContent",
    "ArticleSummary",
    "ArticleSlug",
    # Tags
    "TagName",
    "TagSlug",
    # Comments
    "CommentContent",
    # Pagination
    "Cursor",
    "CursorPage",
    "CursorPageMeta",
    "CursorPagination",
    "OffsetPage",
    "OffsetPageMeta",
    "OffsetPagination",
    "clamp_page_size",
    "decode_cursor",
    "encode_cursor",
]
