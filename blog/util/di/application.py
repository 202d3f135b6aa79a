"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.article import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    RestoreArticleUseCase,
    UpdateArticleUseCase,
)
from blog.application.usecase.auth import LoginUseCase, ValidateTokenUseCase
from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsByArticleUseCase,
    ListRepliesUseCase,
)
from blog.application.usecase.seed import SeedArticlesUseCase
from blog.application.usecase.tag import ListTagsUseCase
from blog.config import AuthSettings, PaginationSettings, SeedSettings
from blog.domain.repository import ArticleRepository
from blog.domain.service import (
    ArticleService,
    AuthService,
    CommentService,
    JWTService,
    TagService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        user_service: UserService,
        auth_settings: AuthSettings,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            auth_service=auth_service,
            jwt_service=jwt_service,
            user_service=user_service,
            auth_settings=auth_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_validate_token_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> ValidateTokenUseCase:
        """Provide validate token use case."""
        return ValidateTokenUseCase(jwt_service=jwt_service, user_service=user_service)

    # Article use cases
    @provide(scope=Scope.REQUEST)
    def get_create_article_use_case(
        self,
        article_service: ArticleService,
        tag_service: TagService,
        user_service: UserService,
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(
            article_service=article_service,
            tag_service=tag_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_article_use_case(
        self, article_service: ArticleService, user_service: UserService
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(
            article_service=article_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_articles_use_case(
        self,
        article_repository: ArticleRepository,
        pagination_settings: PaginationSettings,
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(
            article_repository=article_repository,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_article_use_case(
        self, article_service: ArticleService, tag_service: TagService
    ) -> UpdateArticleUseCase:
        """Provide update article use case."""
        return UpdateArticleUseCase(
            article_service=article_service, tag_service=tag_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_article_use_case(
        self, article_service: ArticleService
    ) -> DeleteArticleUseCase:
        """Provide delete article use case."""
        return DeleteArticleUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_restore_article_use_case(
        self, article_service: ArticleService
    ) -> RestoreArticleUseCase:
        """Provide restore article use case."""
        return RestoreArticleUseCase(article_service=article_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_by_article_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListCommentsByArticleUseCase:
        """Provide list comments by article use case."""
        return ListCommentsByArticleUseCase(
            comment_service=comment_service,
            article_service=article_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_replies_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(
            comment_service=comment_service,
            user_service=user_service,
            pagination_settings=pagination_settings,
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    # Seed use cases
    @provide(scope=Scope.REQUEST)
    def get_seed_articles_use_case(
        self,
        create_article: CreateArticleUseCase,
        article_service: ArticleService,
        user_service: UserService,
        tag_service: TagService,
        auth_service: AuthService,
        seed_settings: SeedSettings,
    ) -> SeedArticlesUseCase:
        """Provide seed articles use case."""
        return SeedArticlesUseCase(
            create_article=create_article,
            article_service=article_service,
            user_service=user_service,
            tag_service=tag_service,
            auth_service=auth_service,
            seed_settings=seed_settings,
        )
