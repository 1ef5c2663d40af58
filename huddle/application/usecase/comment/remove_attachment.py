"""Remove attachment use case."""

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import CommentService
from huddle.domain.value import AttachmentId, CommentId, UserId

from .dto import CommentItem, parse_id


class RemoveAttachmentRequest(BaseModel):
    """Remove attachment request."""

    comment_id: str
    attachment_id: str
    requester_id: str | None


class RemoveAttachmentResponse(CommentItem):
    """Remove attachment response."""

    pass


class RemoveAttachmentUseCase(
    BaseUseCase[RemoveAttachmentRequest, RemoveAttachmentResponse]
):
    """Use case for removing a single attachment from a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: RemoveAttachmentRequest
    ) -> RemoveAttachmentResponse:
        comment_id = parse_id(request.comment_id, CommentId, "comment id")
        attachment_id = parse_id(request.attachment_id, AttachmentId, "attachment id")
        requester_id = (
            parse_id(request.requester_id, UserId, "user id")
            if request.requester_id
            else None
        )

        node = await self.comment_service.remove_attachment(
            comment_id=comment_id,
            requester_id=requester_id,
            attachment_id=attachment_id,
        )
        return RemoveAttachmentResponse.from_node(node)
