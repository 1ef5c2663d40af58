"""Get comments use case."""

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import CommentService
from huddle.domain.value import EventId

from .dto import CommentItem, parse_id


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    event_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    event_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for listing every discussion thread of an event."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments come oldest first, each with its replies nested
        to full depth. ``total`` counts non-deleted comments only.
        """
        event_id = parse_id(request.event_id, EventId, "event id")

        result = await self.comment_service.get_comments_for_event(event_id)

        return GetCommentsResponse(
            event_id=str(event_id),
            comments=[CommentItem.from_node(node) for node in result.comments],
            total=result.total,
        )
