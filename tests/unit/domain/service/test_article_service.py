"""Unit tests for ArticleService."""

import pytest

from blog.domain.error import AuthorizationError, NotFoundError
from blog.domain.repository import ArticleRepository
from blog.domain.service import ArticleService
from blog.domain.value import ArticleSlug, ArticleTitle, Uuid
from tests.conftest import make_article
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGenerateUniqueSlug:
    """Tests for ArticleService.generate_unique_slug."""

    @pytest.mark.asyncio
    async def test_unused_title_slug(self, unit_env):
        # Arrange
        service = await unit_env.get(ArticleService)

        # Act
        slug = await service.generate_unique_slug(
            ArticleTitle.create("Hello Clean Code"), Uuid.generate()
        )

        # Assert
        assert slug.root == "hello-clean-code"

    @pytest.mark.asyncio
    async def test_collisions_get_numeric_suffixes(self, unit_env):
        # Arrange
        repo = await unit_env.get(ArticleRepository)
        service = await unit_env.get(ArticleService)
        author_id = Uuid.generate()
        await repo.save(make_article(author_id, title="Same Title"))
        second = make_article(author_id, title="Same Title")
        second.update_slug(ArticleSlug.create("same-title-1"))
        await repo.save(second)

        # Act
        slug = await service.generate_unique_slug(
            ArticleTitle.create("Same Title"), Uuid.generate()
        )

        # Assert
        assert slug.root == "same-title-2"

    @pytest.mark.asyncio
    async def test_deleted_articles_keep_their_slug(self, unit_env):
        # Arrange
        repo = await unit_env.get(ArticleRepository)
        service = await unit_env.get(ArticleService)
        article = make_article(Uuid.generate(), title="Gone Article")
        article.soft_delete()
        await repo.save(article)

        # Act
        slug = await service.generate_unique_slug(
            ArticleTitle.create("Gone Article"), Uuid.generate()
        )

        # Assert
        assert slug.root == "gone-article-1"

    @pytest.mark.asyncio
    async def test_own_slug_is_not_a_collision(self, unit_env):
        # Arrange
        repo = await unit_env.get(ArticleRepository)
        service = await unit_env.get(ArticleService)
        article = await repo.save(make_article(Uuid.generate(), title="Keep Me Here"))

        # Act
        slug = await service.generate_unique_slug(
            article.title, article.id, current=article.slug
        )

        # Assert
        assert slug.equals(article.slug)

    @pytest.mark.asyncio
    async def test_fallback_for_title_without_slug_characters(self, unit_env):
        # Arrange
        service = await unit_env.get(ArticleService)
        article_id = Uuid.create("1b4e28ba-2fa1-41d2-883f-0016d3cca427")

        # Act
        slug = await service.generate_unique_slug(
            ArticleTitle.create("?!?!?!"), article_id
        )

        # Assert
        assert slug.root == "article-1b4e28ba"

    @pytest.mark.asyncio
    async def test_fallback_for_uppercase_id_is_lowercase(self, unit_env):
        service = await unit_env.get(ArticleService)
        article_id = Uuid.create("1B4E28BA-2FA1-41D2-883F-0016D3CCA427")

        slug = await service.generate_unique_slug(
            ArticleTitle.create("?!?!?!"), article_id
        )

        assert slug.root == "article-1b4e28ba"


class TestArticleLookup:
    """Tests for ArticleService lookups."""

    @pytest.mark.asyncio
    async def test_get_article_not_found(self, unit_env):
        service = await unit_env.get(ArticleService)

        with pytest.raises(NotFoundError):
            await service.get_article(Uuid.generate())

    @pytest.mark.asyncio
    async def test_get_article_hides_deleted(self, unit_env):
        # Arrange
        repo = await unit_env.get(ArticleRepository)
        service = await unit_env.get(ArticleService)
        article = make_article(Uuid.generate())
        article.soft_delete()
        await repo.save(article)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_article(article.id)
        found = await service.get_article(article.id, include_deleted=True)
        assert found.is_deleted is True

    @pytest.mark.asyncio
    async def test_get_article_by_slug(self, unit_env):
        repo = await unit_env.get(ArticleRepository)
        service = await unit_env.get(ArticleService)
        article = await repo.save(make_article(Uuid.generate(), title="Find By Slug"))

        found = await service.get_article_by_slug(ArticleSlug.create("find-by-slug"))

        assert found.id.equals(article.id)

    @pytest.mark.asyncio
    async def test_get_owned_article_rejects_other_user(self, unit_env):
        # Arrange
        repo = await unit_env.get(ArticleRepository)
        service = await unit_env.get(ArticleService)
        article = await repo.save(make_article(Uuid.generate()))
        intruder = Uuid.generate()

        # Act & Assert
        with pytest.raises(AuthorizationError) as exc_info:
            await service.get_owned_article(article.id, intruder)
        assert exc_info.value.resource == "article"
        assert exc_info.value.user_id == intruder.root

    @pytest.mark.asyncio
    async def test_exists_for_author(self, unit_env):
        repo = await unit_env.get(ArticleRepository)
        service = await unit_env.get(ArticleService)
        author_id = Uuid.generate()
        await repo.save(make_article(author_id, title="Existing Title"))

        assert await service.exists_for_author(author_id, ArticleTitle.create("Existing Title"))
        assert not await service.exists_for_author(
            Uuid.generate(), ArticleTitle.create("Existing Title")
        )
