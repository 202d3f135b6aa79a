"""Persistence infrastructure providers."""

from dishka import Scope, provide

from blog.domain.repository import (
    ArticleRepository,
    CommentRepository,
    TagRepository,
    UserRepository,
)
from blog.persistence.repository.inmemory import (
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from blog.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence provider using in-memory repositories - concrete.

    Repositories are APP-scoped so state is shared by every request of one
    container and discarded with it.
    """

    scope = Scope.APP

    @provide
    def get_user_repository(self) -> UserRepository:
        """Provide User repository."""
        return InMemoryUserRepository()

    @provide
    def get_article_repository(self) -> ArticleRepository:
        """Provide Article repository."""
        return InMemoryArticleRepository()

    @provide
    def get_comment_repository(self) -> CommentRepository:
        """Provide Comment repository."""
        return InMemoryCommentRepository()

    @provide
    def get_tag_repository(self) -> TagRepository:
        """Provide Tag repository."""
        return InMemoryTagRepository()
