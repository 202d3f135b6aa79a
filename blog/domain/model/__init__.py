"""Domain model entities for the blog."""

from blog.domain.model.article import Article, ArticleTag
from blog.domain.model.comment import Comment
from blog.domain.model.tag import Tag
from blog.domain.model.token import TokenPayload
from blog.domain.model.user import User

__all__ = [
    "Article",
    "ArticleTag",
    "Comment",
    "Tag",
    "TokenPayload",
    "User",
]
