"""Domain services."""

from .article_service import ArticleService
from .auth_service import AuthService, PasswordHasher
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "ArticleService",
    "AuthService",
    "CommentService",
    "JWTService",
    "PasswordHasher",
    "Service",
    "TagService",
    "UserService",
]
