"""Unit tests for the domain error to HTTP status mapping."""

import pytest

from huddle.domain.error import (
    ConflictError,
    DepthExceededError,
    DomainError,
    ForbiddenError,
    InvalidStateError,
    NotAuthenticatedError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from huddle.interface.error import status_for


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (ValidationError("bad"), 400),
        (DepthExceededError(4, 3), 400),
        (NotAuthenticatedError("post comments"), 401),
        (ForbiddenError("comment", "c1", "u1"), 403),
        (NotFoundError("Comment", "c1"), 404),
        (ConflictError("Comment", "c1", 2), 409),
        (InvalidStateError("comment", "c1", "edit"), 409),
        (StoreUnavailableError("database", "comments.insert"), 503),
        (DomainError("unexpected"), 500),
    ],
)
def test_status_for(error, status_code):
    assert status_for(error) == status_code


def test_forbidden_message_does_not_leak_ids():
    error = ForbiddenError("comment", "c-123", "u-456")

    assert "c-123" not in str(error)
    assert "u-456" not in str(error)
