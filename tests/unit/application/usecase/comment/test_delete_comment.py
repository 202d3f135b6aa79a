"""Unit tests for DeleteCommentUseCase."""

import pytest

from blog.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListRepliesRequest,
    ListRepliesUseCase,
)
from blog.domain.error import AuthorizationError, NotFoundError, ValidationError
from blog.domain.repository import CommentRepository
from blog.domain.value import Uuid
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteComment:
    """Tests for soft-deleting comments."""

    @pytest.mark.asyncio
    async def test_author_deletes(self, unit_env):
        # Arrange
        repo = await unit_env.get(CommentRepository)
        author_id = Uuid.generate()
        comment = await repo.save(make_comment(Uuid.generate(), author_id))
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=comment.id.root, user_id=author_id.root)
        )

        # Assert
        assert response.success is True
        assert response.comment_id == comment.id.root
        assert await repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_other_user_is_rejected(self, unit_env):
        repo = await unit_env.get(CommentRepository)
        comment = await repo.save(make_comment(Uuid.generate(), Uuid.generate()))
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(AuthorizationError):
            await use_case.execute(
                DeleteCommentRequest(
                    comment_id=comment.id.root, user_id=Uuid.generate().root
                )
            )

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(
                    comment_id=Uuid.generate().root, user_id=Uuid.generate().root
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_id(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                DeleteCommentRequest(comment_id="nope", user_id=Uuid.generate().root)
            )

    @pytest.mark.asyncio
    async def test_replies_of_deleted_parent_stay(self, unit_env):
        # Arrange
        repo = await unit_env.get(CommentRepository)
        article_id = Uuid.generate()
        author_id = Uuid.generate()
        parent = await repo.save(make_comment(article_id, author_id))
        reply = await repo.save(
            make_comment(article_id, Uuid.generate(), "reply", parent_id=parent.id)
        )
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act
        await use_case.execute(
            DeleteCommentRequest(comment_id=parent.id.root, user_id=author_id.root)
        )

        # Assert
        assert await repo.find_by_id(reply.id) is not None
        list_replies = await unit_env.get(ListRepliesUseCase)
        with pytest.raises(NotFoundError):
            await list_replies.execute(ListRepliesRequest(comment_id=parent.id.root))
