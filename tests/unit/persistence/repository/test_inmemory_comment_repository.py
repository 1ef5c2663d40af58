"""Unit tests for InMemoryCommentRepository."""

from uuid import uuid4

import pytest

from huddle.domain.error import ConflictError, NotFoundError, ValidationError
from huddle.domain.model import Attachment, CommentPatch
from huddle.domain.value import (
    AttachmentId,
    AttachmentType,
    CommentId,
    EventId,
    UserId,
)
from huddle.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment

EVENT_ID = EventId(uuid4())
AUTHOR_ID = UserId(uuid4())


@pytest.fixture
def repo():
    return InMemoryCommentRepository()


class TestInMemoryCommentRepository:
    """Ordering, filtering and versioned updates."""

    @pytest.mark.asyncio
    async def test_insert_rejects_inconsistent_record(self, repo):
        bad = make_comment(EVENT_ID, AUTHOR_ID, "x", depth=1)

        with pytest.raises(ValidationError):
            await repo.insert(bad)

    @pytest.mark.asyncio
    async def test_find_by_event_orders_by_time_then_insertion(self, repo):
        # Arrange
        late = make_comment(EVENT_ID, AUTHOR_ID, "late", minutes_ago=1)
        early = make_comment(EVENT_ID, AUTHOR_ID, "early", minutes_ago=5)
        tie_a = make_comment(EVENT_ID, AUTHOR_ID, "tie a")
        tie_b = make_comment(EVENT_ID, AUTHOR_ID, "tie b", created_at=tie_a.created_at)
        for comment in (late, early, tie_a, tie_b):
            await repo.insert(comment)

        # Act
        comments = await repo.find_by_event(EVENT_ID)

        # Assert
        assert [c.id for c in comments] == [early.id, late.id, tie_a.id, tie_b.id]

    @pytest.mark.asyncio
    async def test_deleted_comments_are_filtered_unless_requested(self, repo):
        # Arrange
        kept = await repo.insert(make_comment(EVENT_ID, AUTHOR_ID, "kept"))
        gone = await repo.insert(make_comment(EVENT_ID, AUTHOR_ID, "gone"))
        await repo.update(gone.id, CommentPatch(is_deleted=True))

        # Act & Assert
        assert [c.id for c in await repo.find_by_event(EVENT_ID)] == [kept.id]
        assert len(await repo.find_by_event(EVENT_ID, include_deleted=True)) == 2

    @pytest.mark.asyncio
    async def test_find_by_thread_returns_root_and_descendants(self, repo):
        # Arrange
        root = await repo.insert(make_comment(EVENT_ID, AUTHOR_ID, "r", minutes_ago=3))
        child = await repo.insert(
            make_comment(EVENT_ID, AUTHOR_ID, "c", parent=root, minutes_ago=2)
        )
        grandchild = await repo.insert(
            make_comment(EVENT_ID, AUTHOR_ID, "g", parent=child, minutes_ago=1)
        )
        await repo.insert(make_comment(EVENT_ID, AUTHOR_ID, "other"))

        # Act
        thread = await repo.find_by_thread(root.id)

        # Assert
        assert [c.id for c in thread] == [root.id, child.id, grandchild.id]

    @pytest.mark.asyncio
    async def test_update_checks_version(self, repo):
        # Arrange
        comment = await repo.insert(make_comment(EVENT_ID, AUTHOR_ID, "v1"))

        # Act
        updated = await repo.update(
            comment.id, CommentPatch(text="v2"), expected_version=1
        )

        # Assert
        assert updated.version == 2
        with pytest.raises(ConflictError):
            await repo.update(comment.id, CommentPatch(text="v3"), expected_version=1)
        assert (await repo.find_by_id(comment.id)).text == "v2"

    @pytest.mark.asyncio
    async def test_update_unknown_comment(self, repo):
        with pytest.raises(NotFoundError):
            await repo.update(CommentId(uuid4()), CommentPatch(text="x"))

    @pytest.mark.asyncio
    async def test_find_attachment_urls(self, repo):
        attachment = Attachment(
            id=AttachmentId(uuid4()),
            type=AttachmentType.IMAGE,
            url="/uploads/comments/a.png",
            filename="a.png",
            size=1,
            mimetype="image/png",
        )
        await repo.insert(
            make_comment(EVENT_ID, AUTHOR_ID, "", attachments=[attachment])
        )
        await repo.insert(make_comment(EVENT_ID, AUTHOR_ID, "plain"))

        assert await repo.find_attachment_urls() == {attachment.url}
