"""Domain services."""

from .attachment_service import AttachmentService, AttachmentStore
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .thread_builder import (
    CommentNode,
    CommentThread,
    EventComments,
    build_thread,
    count_nodes,
    prune_deleted,
)

__all__ = [
    "AttachmentService",
    "AttachmentStore",
    "CommentNode",
    "CommentService",
    "CommentThread",
    "EventComments",
    "JWTService",
    "Service",
    "build_thread",
    "count_nodes",
    "prune_deleted",
]
