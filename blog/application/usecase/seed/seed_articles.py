"""Seed articles use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from blog.application.usecase.article import CreateArticleRequest, CreateArticleUseCase
from blog.application.usecase.base import BaseUseCase
from blog.config import SeedSettings
from blog.domain.error import DomainError
from blog.domain.model import User
from blog.domain.service import ArticleService, AuthService, TagService, UserService
from blog.domain.value import ArticleTitle, DisplayName, Email, PasswordHash, TagName
from blog.util.slug import slugify


class ArticleSeedRow(BaseModel):
    """One row of the seed file."""

    title: Optional[str] = None
    author: Optional[str] = None
    content: Optional[str] = None
    tag1: Optional[str] = None
    tag2: Optional[str] = None
    tag3: Optional[str] = None

    def tag_names(self) -> list[str]:
        return [t.strip() for t in (self.tag1, self.tag2, self.tag3) if t and t.strip()]


class SeedArticlesRequest(BaseModel):
    """Seed articles request."""

    rows: list[ArticleSeedRow]


class SeedArticlesResponse(BaseModel):
    """Seed articles response."""

    created: int = 0
    skipped_existing: int = 0
    skipped_invalid: int = 0
    users_created: int = 0
    errors: list[str] = Field(default_factory=list)


class SeedArticlesUseCase(BaseUseCase):
    """Use case for loading demo content.

    Authors become users with email <slugified name>@<email_domain> and the
    configured default password. Running it twice creates nothing new.
    """

    def __init__(
        self,
        create_article: CreateArticleUseCase,
        article_service: ArticleService,
        user_service: UserService,
        tag_service: TagService,
        auth_service: AuthService,
        seed_settings: SeedSettings,
    ) -> None:
        """Initialize seed articles use case.

        Args:
            create_article: Create article use case (all rows go through it)
            article_service: Article domain service
            user_service: User domain service
            tag_service: Tag domain service
            auth_service: Authentication domain service (password hashing)
            seed_settings: Seed settings
        """
        self.create_article = create_article
        self.article_service = article_service
        self.user_service = user_service
        self.tag_service = tag_service
        self.auth_service = auth_service
        self.seed_settings = seed_settings
        self._password_hash: Optional[PasswordHash] = None

    async def execute(self, request: SeedArticlesRequest) -> SeedArticlesResponse:
        """Execute seed flow.

        Rows without title, author or content, or whose values fail
        validation, are skipped and reported.

        Args:
            request: Seed rows

        Returns:
            Counts of what was created and skipped
        """
        response = SeedArticlesResponse()
        authors: dict[str, User] = {}

        with logfire.span("seed_articles.execute", rows=len(request.rows)):
            for index, row in enumerate(request.rows):
                title = (row.title or "").strip()
                author_name = (row.author or "").strip()
                content = (row.content or "").strip()
                if not title or not author_name or not content:
                    response.skipped_invalid += 1
                    response.errors.append(f"Row {index}: missing title, author or content")
                    continue

                try:
                    author = authors.get(author_name)
                    if author is None:
                        author, created = await self._ensure_user(author_name)
                        authors[author_name] = author
                        response.users_created += int(created)

                    for name in row.tag_names():
                        await self.tag_service.ensure_tag(TagName.create(name))

                    if await self.article_service.exists_for_author(
                        author.id, ArticleTitle.create(title)
                    ):
                        response.skipped_existing += 1
                        continue

                    await self.create_article.execute(
                        CreateArticleRequest(
                            author_id=author.id.root,
                            title=title,
                            content=content,
                            tags=row.tag_names(),
                        )
                    )
                    response.created += 1
                except DomainError as e:
                    logfire.warn("Seed row skipped", row=index, error=str(e))
                    response.skipped_invalid += 1
                    response.errors.append(f"Row {index}: {e}")

            logfire.info(
                "Seeding finished",
                created=response.created,
                skipped_existing=response.skipped_existing,
                skipped_invalid=response.skipped_invalid,
                users_created=response.users_created,
            )
            return response

    async def _ensure_user(self, display_name: str) -> tuple[User, bool]:
        """Find or register the user for an author name."""
        email = Email.create(f"{slugify(display_name)}@{self.seed_settings.email_domain}")
        existing = await self.user_service.get_user_by_email(email)
        if existing is not None:
            return existing, False

        user = await self.user_service.register_user(
            email=email,
            password_hash=self._default_password_hash(),
            display_name=DisplayName.create(display_name),
        )
        return user, True

    def _default_password_hash(self) -> PasswordHash:
        # Hashed once per run and shared by every seeded user
        if self._password_hash is None:
            self._password_hash = PasswordHash.create(
                self.auth_service.hash_password(self.seed_settings.default_password)
            )
        return self._password_hash
