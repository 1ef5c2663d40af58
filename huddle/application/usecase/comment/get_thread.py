"""Get thread use case."""

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import CommentService
from huddle.domain.value import CommentId

from .dto import CommentItem, parse_id


class GetThreadRequest(BaseModel):
    """Get thread request."""

    comment_id: str  # Any comment of the thread


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread: CommentItem
    detached: list[CommentItem]
    total: int


class GetThreadUseCase(BaseUseCase[GetThreadRequest, GetThreadResponse]):
    """Use case for fetching the whole thread a comment belongs to."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        comment_id = parse_id(request.comment_id, CommentId, "comment id")

        result = await self.comment_service.get_thread(comment_id)

        return GetThreadResponse(
            thread=CommentItem.from_node(result.root),
            detached=[CommentItem.from_node(node) for node in result.detached],
            total=result.total,
        )
