"""Attachment storage infrastructure providers."""

from dishka import Scope, provide

from huddle.adapter.storage import LocalAttachmentStore
from huddle.config import StorageSettings
from huddle.domain.service import AttachmentStore
from huddle.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local upload directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_attachment_store(self, settings: StorageSettings) -> AttachmentStore:
        """Provide local filesystem attachment store."""
        return LocalAttachmentStore(
            upload_root=settings.upload_root,
            comment_folder=settings.comment_folder,
            url_prefix=settings.url_prefix,
        )
