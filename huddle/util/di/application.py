"""Application layer DI providers."""

from dishka import Scope, provide

from huddle.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetThreadUseCase,
    RemoveAttachmentUseCase,
    UpdateCommentUseCase,
)
from huddle.domain.service import CommentService
from huddle.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_get_thread_use_case(
        self, comment_service: CommentService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(comment_service=comment_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_remove_attachment_use_case(
        self, comment_service: CommentService
    ) -> RemoveAttachmentUseCase:
        """Provide remove attachment use case."""
        return RemoveAttachmentUseCase(comment_service=comment_service)
