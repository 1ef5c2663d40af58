"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .dto import AttachmentItem, AuthorItem, CommentItem
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .remove_attachment import (
    RemoveAttachmentRequest,
    RemoveAttachmentResponse,
    RemoveAttachmentUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "AttachmentItem",
    "AuthorItem",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "RemoveAttachmentRequest",
    "RemoveAttachmentResponse",
    "RemoveAttachmentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
