"""Integration tests for PostgresCommentRepository.

These tests run against a migrated PostgreSQL database and verify the
JSONB attachment round trip and the versioned update statement.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from huddle.domain.error import ConflictError, NotFoundError
from huddle.domain.model import Attachment, CommentPatch
from huddle.domain.repository import CommentRepository, UserRepository
from huddle.domain.value import (
    AttachmentId,
    AttachmentType,
    CommentId,
    EventId,
    UserId,
)
from huddle.persistence.tables import events_table, users_table
from tests.conftest import make_comment
from tests.harness import create_env_fixture, requires_database

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = requires_database


async def seed(env) -> tuple[EventId, UserId]:
    """Insert an event and a user for comments to reference."""
    session = await env.get(AsyncSession)
    event_id = EventId(uuid4())
    user_id = UserId(uuid4())
    suffix = uuid4().hex[:8]

    await session.execute(
        users_table.insert().values(
            id=user_id,
            username=f"user_{suffix}",
            email=f"user_{suffix}@example.com",
            first_name="Test",
        )
    )
    await session.execute(
        events_table.insert().values(id=event_id, title="Integration meetup")
    )
    return event_id, user_id


class TestPostgresCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_insert_round_trips_attachments(self, integration_env):
        # Arrange
        event_id, user_id = await seed(integration_env)
        repo = await integration_env.get(CommentRepository)
        attachment = Attachment(
            id=AttachmentId(uuid4()),
            type=AttachmentType.IMAGE,
            url=f"/uploads/comments/{uuid4().hex}.png",
            filename="photo.png",
            size=68,
            mimetype="image/png",
        )
        comment = make_comment(
            event_id, user_id, "With image", attachments=[attachment]
        )

        # Act
        await repo.insert(comment)
        found = await repo.find_by_id(comment.id)

        # Assert
        assert found is not None
        assert found.attachments == [attachment]
        assert found.created_at.tzinfo is not None
        assert attachment.url in await repo.find_attachment_urls()

    @pytest.mark.asyncio
    async def test_thread_query_and_ordering(self, integration_env):
        # Arrange
        event_id, user_id = await seed(integration_env)
        repo = await integration_env.get(CommentRepository)
        root = await repo.insert(make_comment(event_id, user_id, "root", minutes_ago=3))
        reply = await repo.insert(
            make_comment(event_id, user_id, "reply", parent=root, minutes_ago=2)
        )
        nested = await repo.insert(
            make_comment(event_id, user_id, "nested", parent=reply, minutes_ago=1)
        )
        other = await repo.insert(make_comment(event_id, user_id, "other root"))

        # Act
        thread = await repo.find_by_thread(root.id)
        everything = await repo.find_by_event(event_id)

        # Assert
        assert [c.id for c in thread] == [root.id, reply.id, nested.id]
        assert [c.id for c in everything] == [root.id, reply.id, nested.id, other.id]
        assert nested.root_id == root.id

    @pytest.mark.asyncio
    async def test_versioned_update(self, integration_env):
        # Arrange
        event_id, user_id = await seed(integration_env)
        repo = await integration_env.get(CommentRepository)
        comment = await repo.insert(make_comment(event_id, user_id, "v1"))
        edited_at = datetime.now(timezone.utc)

        # Act
        updated = await repo.update(
            comment.id,
            CommentPatch(text="v2", edited_at=edited_at),
            expected_version=1,
        )

        # Assert
        assert updated.text == "v2"
        assert updated.version == 2
        assert updated.edited_at == edited_at
        with pytest.raises(ConflictError):
            await repo.update(comment.id, CommentPatch(text="v3"), expected_version=1)

    @pytest.mark.asyncio
    async def test_update_missing_comment(self, integration_env):
        repo = await integration_env.get(CommentRepository)

        with pytest.raises(NotFoundError):
            await repo.update(CommentId(uuid4()), CommentPatch(text="x"))

    @pytest.mark.asyncio
    async def test_soft_deleted_comments_are_filtered(self, integration_env):
        # Arrange
        event_id, user_id = await seed(integration_env)
        repo = await integration_env.get(CommentRepository)
        kept = await repo.insert(make_comment(event_id, user_id, "kept"))
        gone = await repo.insert(make_comment(event_id, user_id, "gone"))

        # Act
        await repo.update(gone.id, CommentPatch(is_deleted=True, attachments=[]))

        # Assert
        assert [c.id for c in await repo.find_by_event(event_id)] == [kept.id]
        assert len(await repo.find_by_event(event_id, include_deleted=True)) == 2

    @pytest.mark.asyncio
    async def test_find_profiles(self, integration_env):
        _, user_id = await seed(integration_env)
        users = await integration_env.get(UserRepository)

        profiles = await users.find_profiles([user_id, UserId(uuid4())])

        assert list(profiles) == [user_id]
        assert profiles[user_id].first_name == "Test"
