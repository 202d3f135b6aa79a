"""Article use cases."""

from .create_article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
)
from .delete_article import (
    DeleteArticleRequest,
    DeleteArticleResponse,
    DeleteArticleUseCase,
)
from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .list_articles import (
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)
from .restore_article import (
    RestoreArticleRequest,
    RestoreArticleResponse,
    RestoreArticleUseCase,
)
from .update_article import (
    UpdateArticleRequest,
    UpdateArticleResponse,
    UpdateArticleUseCase,
)

__all__ = [
    "CreateArticleRequest",
    "CreateArticleResponse",
    "CreateArticleUseCase",
    "DeleteArticleRequest",
    "DeleteArticleResponse",
    "DeleteArticleUseCase",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "ListArticlesUseCase",
    "RestoreArticleRequest",
    "RestoreArticleResponse",
    "RestoreArticleUseCase",
    "UpdateArticleRequest",
    "UpdateArticleResponse",
    "UpdateArticleUseCase",
]
