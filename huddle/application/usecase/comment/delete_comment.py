"""Delete comment use case."""

from pydantic import BaseModel

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import CommentService
from huddle.domain.value import CommentId, UserId

from .dto import parse_id


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    requester_id: str | None


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    message: str = "Comment deleted successfully"


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Replies to the comment are left untouched.
        """
        comment_id = parse_id(request.comment_id, CommentId, "comment id")
        requester_id = (
            parse_id(request.requester_id, UserId, "user id")
            if request.requester_id
            else None
        )

        deleted = await self.comment_service.delete_comment(comment_id, requester_id)

        return DeleteCommentResponse(comment_id=str(deleted.id))
