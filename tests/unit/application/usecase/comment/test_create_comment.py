"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from huddle.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from huddle.domain.error import NotAuthenticatedError, ValidationError
from huddle.domain.repository import EventRepository, UserRepository
from tests.conftest import make_event, make_upload, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_and_reply(self, unit_env):
        """Responses carry string ids, thread position and author."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        event = await (await unit_env.get(EventRepository)).save(make_event())
        author = await (await unit_env.get(UserRepository)).save(make_user("carol"))

        # Act
        root = await use_case.execute(
            CreateCommentRequest(
                event_id=str(event.id),
                author_id=str(author.id),
                text="Great talk!",
            )
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                event_id=str(event.id),
                author_id=str(author.id),
                text="",
                parent_id=root.comment_id,
                uploads=[make_upload()],
            )
        )

        # Assert
        assert root.text == "Great talk!"
        assert root.depth == 0
        assert root.author.username == "carol"
        assert root.is_edited is False
        assert reply.parent_id == root.comment_id
        assert reply.root_id == root.comment_id
        assert reply.depth == 1
        assert len(reply.attachments) == 1
        assert reply.attachments[0].type == "image"

    @pytest.mark.asyncio
    async def test_malformed_event_id_is_a_validation_error(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="event id"):
            await use_case.execute(
                CreateCommentRequest(
                    event_id="not-a-uuid", author_id=str(uuid4()), text="hi"
                )
            )

    @pytest.mark.asyncio
    async def test_missing_author_is_not_authenticated(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        event = await (await unit_env.get(EventRepository)).save(make_event())

        with pytest.raises(NotAuthenticatedError):
            await use_case.execute(
                CreateCommentRequest(event_id=str(event.id), author_id=None, text="hi")
            )
