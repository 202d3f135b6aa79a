"""Unit tests for CreateCommentUseCase."""

import pytest

from blog.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from blog.domain.error import NotFoundError, StructuralConstraintError, ValidationError
from blog.domain.repository import ArticleRepository, UserRepository
from blog.domain.value import Uuid
from tests.conftest import make_article, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _article_and_user(env):
    user = await (await env.get(UserRepository)).save(make_user())
    article = await (await env.get(ArticleRepository)).save(make_article(user.id))
    return article, user


class TestCreateComment:
    """Tests for commenting and replying."""

    @pytest.mark.asyncio
    async def test_top_level_comment(self, unit_env):
        # Arrange
        article, user = await _article_and_user(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                article_id=article.id.root, author_id=user.id.root, content="  Nice!  "
            )
        )

        # Assert
        comment = response.comment
        assert comment.content == "Nice!"
        assert comment.parent_id is None
        assert comment.article_id == article.id.root
        assert comment.author.display_name == "Test Author"

    @pytest.mark.asyncio
    async def test_reply(self, unit_env):
        # Arrange
        article, user = await _article_and_user(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)
        parent = await use_case.execute(
            CreateCommentRequest(
                article_id=article.id.root, author_id=user.id.root, content="Question?"
            )
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                article_id=article.id.root,
                author_id=user.id.root,
                content="Answer.",
                parent_id=parent.comment.id,
            )
        )

        # Assert
        assert reply.comment.parent_id == parent.comment.id

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_rejected(self, unit_env):
        # Arrange
        article, user = await _article_and_user(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)
        parent = await use_case.execute(
            CreateCommentRequest(
                article_id=article.id.root, author_id=user.id.root, content="Top"
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                article_id=article.id.root,
                author_id=user.id.root,
                content="Reply",
                parent_id=parent.comment.id,
            )
        )

        # Act & Assert
        with pytest.raises(StructuralConstraintError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id.root,
                    author_id=user.id.root,
                    content="Too deep",
                    parent_id=reply.comment.id,
                )
            )

    @pytest.mark.asyncio
    async def test_parent_from_another_article_is_rejected(self, unit_env):
        # Arrange
        article, user = await _article_and_user(unit_env)
        other = await (await unit_env.get(ArticleRepository)).save(
            make_article(user.id, title="Another Article")
        )
        use_case = await unit_env.get(CreateCommentUseCase)
        parent = await use_case.execute(
            CreateCommentRequest(
                article_id=other.id.root, author_id=user.id.root, content="Elsewhere"
            )
        )

        # Act & Assert
        with pytest.raises(StructuralConstraintError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id.root,
                    author_id=user.id.root,
                    content="Cross-thread",
                    parent_id=parent.comment.id,
                )
            )

    @pytest.mark.asyncio
    async def test_deleted_article_is_not_found(self, unit_env):
        # Arrange
        article, user = await _article_and_user(unit_env)
        article.soft_delete()
        await (await unit_env.get(ArticleRepository)).save(article)
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id.root, author_id=user.id.root, content="Hello"
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_parent(self, unit_env):
        article, user = await _article_and_user(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id.root,
                    author_id=user.id.root,
                    content="Hello",
                    parent_id=Uuid.generate().root,
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_author(self, unit_env):
        article, _ = await _article_and_user(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id.root,
                    author_id=Uuid.generate().root,
                    content="Hello",
                )
            )

    @pytest.mark.asyncio
    async def test_content_limits(self, unit_env):
        article, user = await _article_and_user(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id.root, author_id=user.id.root, content="   "
                )
            )
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=article.id.root,
                    author_id=user.id.root,
                    content="x" * 1001,
                )
            )
