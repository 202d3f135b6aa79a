"""Unit tests for ListRepliesUseCase."""

import pytest

from blog.application.usecase.comment import ListRepliesRequest, ListRepliesUseCase
from blog.domain.error import NotFoundError
from blog.domain.repository import CommentRepository, UserRepository
from blog.domain.value import Uuid
from tests.conftest import make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListReplies:
    """Tests for paging through replies."""

    @pytest.mark.asyncio
    async def test_pages_oldest_first(self, unit_env):
        # Arrange
        user = await (await unit_env.get(UserRepository)).save(make_user())
        repo = await unit_env.get(CommentRepository)
        article_id = Uuid.generate()
        parent = await repo.save(make_comment(article_id, user.id, "parent"))
        for i in range(3):
            await repo.save(make_comment(article_id, user.id, f"r{i}", parent_id=parent.id))
        use_case = await unit_env.get(ListRepliesUseCase)

        # Act
        first = await use_case.execute(
            ListRepliesRequest(comment_id=parent.id.root, size=2)
        )
        second = await use_case.execute(
            ListRepliesRequest(
                comment_id=parent.id.root, size=2, after=first.meta.next_cursor
            )
        )

        # Assert
        items = first.data + second.data
        keys = [(r.created_at, r.id) for r in items]
        assert keys == sorted(keys)
        assert len(set(r.id for r in items)) == 3
        assert all(r.parent_id == parent.id.root for r in items)
        assert items[0].author.display_name == "Test Author"
        assert second.meta.next_cursor is None

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        use_case = await unit_env.get(ListRepliesUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListRepliesRequest(comment_id=Uuid.generate().root))
