"""Unit tests for TagService."""

import pytest

from blog.domain.error import ValidationError
from blog.domain.model import Tag
from blog.domain.repository import TagRepository
from blog.domain.service import TagService
from blog.domain.value import TagName
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolveTags:
    """Tests for TagService.resolve_tags."""

    @pytest.mark.asyncio
    async def test_creates_missing_tags(self, unit_env):
        # Arrange
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)

        # Act
        tags = await service.resolve_tags(["Machine Learning", "Python"])

        # Assert
        assert [(t.slug, t.name) for t in tags] == [
            ("machine-learning", "Machine Learning"),
            ("python", "Python"),
        ]
        assert len(await repo.find_all()) == 2

    @pytest.mark.asyncio
    async def test_reuses_existing_tag_name(self, unit_env):
        # Arrange
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        await repo.save(Tag.create(TagName.create("API Design")))

        # Act
        tags = await service.resolve_tags(["api-design"])

        # Assert
        assert tags[0].slug == "api-design"
        assert tags[0].name == "API Design"
        assert len(await repo.find_all()) == 1

    @pytest.mark.asyncio
    async def test_drops_duplicates_keeping_first_position(self, unit_env):
        service = await unit_env.get(TagService)

        tags = await service.resolve_tags(["Python", "Go", "python", "GO"])

        assert [t.slug for t in tags] == ["python", "go"]

    @pytest.mark.asyncio
    async def test_invalid_name(self, unit_env):
        service = await unit_env.get(TagService)

        with pytest.raises(ValidationError):
            await service.resolve_tags(["x"])

    @pytest.mark.asyncio
    async def test_empty(self, unit_env):
        service = await unit_env.get(TagService)

        assert await service.resolve_tags([]) == []


class TestTagQueries:
    """Tests for ensure_tag and get_all_tags."""

    @pytest.mark.asyncio
    async def test_ensure_tag_is_idempotent(self, unit_env):
        service = await unit_env.get(TagService)

        first = await service.ensure_tag(TagName.create("Databases"))
        second = await service.ensure_tag(TagName.create("Databases"))

        assert first.slug.equals(second.slug)
        assert len(await service.get_all_tags()) == 1

    @pytest.mark.asyncio
    async def test_get_all_tags_filters_inactive_and_sorts_by_name(self, unit_env):
        # Arrange
        service = await unit_env.get(TagService)
        repo = await unit_env.get(TagRepository)
        await repo.save(Tag.create(TagName.create("Zig")))
        await repo.save(Tag.create(TagName.create("Ada")))
        await repo.save(Tag.create(TagName.create("Cobol"), active=False))

        # Act
        active = await service.get_all_tags()
        everything = await service.get_all_tags(active_only=False)

        # Assert
        assert [t.name.root for t in active] == ["Ada", "Zig"]
        assert [t.name.root for t in everything] == ["Ada", "Cobol", "Zig"]
