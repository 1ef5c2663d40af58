"""Unit tests for GetCommentsUseCase and GetThreadUseCase."""

import pytest

from huddle.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetThreadRequest,
    GetThreadUseCase,
)
from huddle.domain.error import ValidationError
from huddle.domain.repository import EventRepository, UserRepository
from tests.conftest import make_event, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_thread(unit_env):
    """Create root -> reply -> nested reply and return their ids."""
    create = await unit_env.get(CreateCommentUseCase)
    event = await (await unit_env.get(EventRepository)).save(make_event())
    author = await (await unit_env.get(UserRepository)).save(make_user())

    ids = []
    parent_id = None
    for text in ("root", "reply", "nested"):
        created = await create.execute(
            CreateCommentRequest(
                event_id=str(event.id),
                author_id=str(author.id),
                text=text,
                parent_id=parent_id,
            )
        )
        ids.append(created.comment_id)
        parent_id = created.comment_id
    return str(event.id), ids


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_items(self, unit_env):
        # Arrange
        event_id, (root_id, reply_id, nested_id) = await _seed_thread(unit_env)
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        response = await use_case.execute(GetCommentsRequest(event_id=event_id))

        # Assert
        assert response.event_id == event_id
        assert response.total == 3
        assert [c.comment_id for c in response.comments] == [root_id]
        reply = response.comments[0].replies[0]
        assert reply.comment_id == reply_id
        assert reply.replies[0].comment_id == nested_id
        assert reply.replies[0].root_id == root_id

    @pytest.mark.asyncio
    async def test_malformed_event_id(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(GetCommentsRequest(event_id="42"))


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_thread_from_nested_reply(self, unit_env):
        # Arrange
        _, (root_id, reply_id, nested_id) = await _seed_thread(unit_env)
        use_case = await unit_env.get(GetThreadUseCase)

        # Act
        response = await use_case.execute(GetThreadRequest(comment_id=nested_id))

        # Assert
        assert response.thread.comment_id == root_id
        assert response.thread.replies[0].comment_id == reply_id
        assert response.detached == []
        assert response.total == 3
