"""Create comment use case."""

from pydantic import BaseModel, Field

from huddle.application.usecase.base import BaseUseCase
from huddle.domain.service import CommentService
from huddle.domain.value import CommentId, EventId, UploadedFile, UserId

from .dto import CommentItem, parse_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    event_id: str  # UUID string
    author_id: str | None  # User ID from authenticated user
    text: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies
    uploads: list[UploadedFile] = Field(default_factory=list)


class CreateCommentResponse(CommentItem):
    """Create comment response."""

    pass


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for commenting on an event or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If an id is malformed or the comment is invalid
            NotFoundError: If the event or parent comment does not exist
            DepthExceededError: If the reply would nest too deep
        """
        event_id = parse_id(request.event_id, EventId, "event id")
        author_id = (
            parse_id(request.author_id, UserId, "user id")
            if request.author_id
            else None
        )
        parent_id = (
            parse_id(request.parent_id, CommentId, "parent comment id")
            if request.parent_id
            else None
        )

        node = await self.comment_service.create_comment(
            event_id=event_id,
            author_id=author_id,
            text=request.text,
            parent_id=parent_id,
            uploads=request.uploads,
        )
        return CreateCommentResponse.from_node(node)
