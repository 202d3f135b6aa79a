"""Test configuration and fixtures."""

import os

import logfire

# Keep bcrypt cheap for tests that unmock security
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECURITY__BCRYPT_ROUNDS", "4")

# Spans and logs stay in-process
logfire.configure(send_to_logfire=False, console=False)

from blog.domain.model import Article, ArticleTag, Comment, User  # noqa: E402
from blog.domain.value import (  # noqa: E402
    ArticleContent,
    ArticleTitle,
    CommentContent,
    DisplayName,
    Email,
    PasswordHash,
    Uuid,
)

DEFAULT_CONTENT = (
    "This is the body of a test article. It is long enough to pass the "
    "minimum content length rule."
)


def make_user(
    email: str = "author@example.com",
    display_name: str = "Test Author",
    password_hash: str = "mock-sha256$unused",
    is_active: bool = True,
) -> User:
    """Helper function to build a user entity for tests."""
    return User.create(
        email=Email.create(email),
        password_hash=PasswordHash.create(password_hash),
        display_name=DisplayName.create(display_name),
        is_active=is_active,
    )


def make_article(
    author_id: Uuid,
    title: str = "A Test Article",
    content: str = DEFAULT_CONTENT,
    tags: list[ArticleTag] | None = None,
) -> Article:
    """Helper function to build an article entity for tests.

    The slug is derived from the title.
    """
    return Article.create(
        author_id=author_id,
        title=ArticleTitle.create(title),
        content=ArticleContent.create(content),
        tags=tags,
    )


def make_comment(
    article_id: Uuid,
    author_id: Uuid,
    content: str = "A test comment",
    parent_id: Uuid | None = None,
) -> Comment:
    """Helper function to build a comment entity for tests."""
    return Comment.create(
        article_id=article_id,
        author_id=author_id,
        content=CommentContent.create(content),
        parent_id=parent_id,
    )
