"""In-memory repositories, the persistence backend of the blog core."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
