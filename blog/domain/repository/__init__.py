"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.article import (
    ArticleFilters,
    ArticleListResult,
    ArticleRepository,
)
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.tag import TagRepository
from blog.domain.repository.user import UserRepository

__all__ = [
    "ArticleFilters",
    "ArticleListResult",
    "ArticleRepository",
    "CommentRepository",
    "TagRepository",
    "UserRepository",
]
