"""Update comment use case."""

from pydantic import BaseModel, Field

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import CommentService
from huddle.domain.value import CommentId, UploadedFile, UserId

from .dto import CommentItem, parse_id


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    requester_id: str | None  # User ID from authenticated user
    text: str | None = None  # None keeps the current text
    uploads: list[UploadedFile] = Field(default_factory=list)


class UpdateCommentResponse(CommentItem):
    """Update comment response."""

    pass


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]):
    """Use case for editing a comment's text and appending attachments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
            InvalidStateError: If the comment is deleted
            ValidationError: If the comment would be left without content
        """
        comment_id = parse_id(request.comment_id, CommentId, "comment id")
        requester_id = (
            parse_id(request.requester_id, UserId, "user id")
            if request.requester_id
            else None
        )

        node = await self.comment_service.update_comment(
            comment_id=comment_id,
            requester_id=requester_id,
            text=request.text,
            uploads=request.uploads,
        )
        return UpdateCommentResponse.from_node(node)
