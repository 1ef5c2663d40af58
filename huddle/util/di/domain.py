"""Domain layer DI providers."""

from dishka import Scope, provide

from huddle.config import AuthSettings, CommentSettings, StorageSettings
from huddle.domain.repository import (
    CommentRepository,
    EventRepository,
    UserRepository,
)
from huddle.domain.service import (
    AttachmentService,
    AttachmentStore,
    CommentService,
    JWTService,
)
from huddle.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session
    lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_attachment_service(
        self, store: AttachmentStore, settings: StorageSettings
    ) -> AttachmentService:
        """Provide attachment domain service."""
        return AttachmentService(store=store, settings=settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        event_repository: EventRepository,
        user_repository: UserRepository,
        attachment_service: AttachmentService,
        settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            event_repository=event_repository,
            user_repository=user_repository,
            attachment_service=attachment_service,
            settings=settings,
        )
