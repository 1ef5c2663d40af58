"""Unit tests for the Comment entity."""

from uuid import uuid4

import pytest

from huddle.domain.error import ValidationError
from huddle.domain.model import Attachment, CommentPatch
from huddle.domain.value import (
    AttachmentId,
    AttachmentType,
    CommentId,
    EventId,
    StoredFile,
    UploadedFile,
    UserId,
)
from tests.conftest import make_comment

EVENT_ID = EventId(uuid4())
AUTHOR_ID = UserId(uuid4())


class TestCheckInvariants:
    """Tests for Comment.check_invariants."""

    def test_valid_root_and_reply(self):
        root = make_comment(EVENT_ID, AUTHOR_ID, "root")
        reply = make_comment(EVENT_ID, AUTHOR_ID, "reply", parent=root)

        root.check_invariants()
        reply.check_invariants()

    def test_root_with_parent_is_invalid(self):
        comment = make_comment(
            EVENT_ID, AUTHOR_ID, "x", parent_id=CommentId(uuid4())
        )

        with pytest.raises(ValidationError):
            comment.check_invariants()

    def test_reply_without_root_is_invalid(self):
        root = make_comment(EVENT_ID, AUTHOR_ID, "root")
        comment = make_comment(EVENT_ID, AUTHOR_ID, "x", parent=root, root_id=None)

        with pytest.raises(ValidationError):
            comment.check_invariants()

    def test_self_reference_is_invalid(self):
        comment_id = CommentId(uuid4())
        comment = make_comment(
            EVENT_ID,
            AUTHOR_ID,
            "x",
            id=comment_id,
            parent_id=comment_id,
            root_id=comment_id,
            depth=1,
        )

        with pytest.raises(ValidationError):
            comment.check_invariants()

    def test_empty_live_comment_is_invalid(self):
        with pytest.raises(ValidationError):
            make_comment(EVENT_ID, AUTHOR_ID, "").check_invariants()

    def test_depth_is_bounded_by_the_model(self):
        with pytest.raises(ValueError):
            make_comment(EVENT_ID, AUTHOR_ID, "x", depth=4)


class TestCommentPatch:
    """Tests for CommentPatch.apply."""

    def test_applies_only_given_fields_and_bumps_version(self):
        comment = make_comment(EVENT_ID, AUTHOR_ID, "before")

        updated = CommentPatch(text="after").apply(comment)

        assert updated.text == "after"
        assert updated.version == comment.version + 1
        assert updated.created_at == comment.created_at
        assert comment.text == "before"

    def test_can_clear_attachments(self):
        attachment = Attachment(
            id=AttachmentId(uuid4()),
            type=AttachmentType.IMAGE,
            url="/uploads/comments/a.png",
            filename="a.png",
            size=10,
            mimetype="image/png",
        )
        comment = make_comment(EVENT_ID, AUTHOR_ID, "x", attachments=[attachment])

        updated = CommentPatch(attachments=[]).apply(comment)

        assert updated.attachments == []


class TestValues:
    """Tests for attachment value objects."""

    def test_uploaded_filename_drops_directories(self):
        upload = UploadedFile(
            filename="C:\\Users\\me\\photo.png", mimetype="image/png", data=b"x"
        )

        assert upload.filename == "photo.png"
        assert upload.size == 1

    def test_attachment_type_from_stored_file(self):
        stored = StoredFile(
            url="/uploads/comments/f.pdf",
            filename="f.pdf",
            size=3,
            mimetype="application/pdf",
        )

        attachment = Attachment.from_stored(stored)

        assert attachment.type == AttachmentType.FILE
        assert attachment.url == stored.url
