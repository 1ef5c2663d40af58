"""Attachment domain service.

Sits in front of the attachment store: validates uploads, stores them as
attachment descriptors and discards stored files on a best-effort basis.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

import logfire

from huddle.config import StorageSettings
from huddle.domain.error import ValidationError
from huddle.domain.model import Attachment
from huddle.domain.model.comment import utcnow
from huddle.domain.value import StoredFile, StoredObject, UploadedFile

from .base import Service


class AttachmentStore(ABC):
    """Storage backend for uploaded files.

    Every stored upload becomes a new object, so concurrent callers never
    write to the same file. Implementations raise StoreUnavailableError
    when the backend fails.
    """

    @abstractmethod
    async def store(self, upload: UploadedFile) -> StoredFile:
        """Store an uploaded file.

        Args:
            upload: File received from the client

        Returns:
            Descriptor of the stored file
        """
        pass

    @abstractmethod
    async def delete(self, url: str) -> None:
        """Delete a stored file.

        Deleting a file that does not exist succeeds.

        Args:
            url: URL returned by store()
        """
        pass

    @abstractmethod
    async def list_stored(self) -> list[StoredObject]:
        """List every file currently held by the store."""
        pass


class AttachmentService(Service):
    """Domain service for attachment files."""

    def __init__(self, store: AttachmentStore, settings: StorageSettings) -> None:
        """Initialize attachment service.

        Args:
            store: Attachment store backend
            settings: Storage limits
        """
        self.store = store
        self.settings = settings

    def validate(self, uploads: Sequence[UploadedFile]) -> None:
        """Check uploads against size and type limits.

        Raises:
            ValidationError: If any upload is empty, too large or of a
                disallowed type
        """
        for upload in uploads:
            if upload.size == 0:
                raise ValidationError(f"File {upload.filename} is empty")
            if upload.size > self.settings.max_file_size:
                raise ValidationError(
                    f"File {upload.filename} exceeds the maximum size of "
                    f"{self.settings.max_file_size} bytes"
                )
            if upload.mimetype not in self.settings.allowed_mimetypes:
                raise ValidationError(
                    f"File type {upload.mimetype} is not allowed. Allowed types: "
                    f"{', '.join(self.settings.allowed_mimetypes)}"
                )

    async def store_all(self, uploads: Sequence[UploadedFile]) -> list[Attachment]:
        """Store uploads and build attachment descriptors.

        If one upload fails, the files already stored by this call are
        discarded before the error propagates.

        Args:
            uploads: Validated uploads

        Returns:
            Attachment descriptors in upload order

        Raises:
            StoreUnavailableError: If the store fails
        """
        if not uploads:
            return []

        with logfire.span("attachment_service.store_all", count=len(uploads)):
            attachments: list[Attachment] = []
            try:
                for upload in uploads:
                    stored = await self.store.store(upload)
                    attachments.append(Attachment.from_stored(stored))
            except Exception:
                logfire.error(
                    "Attachment upload failed",
                    stored=len(attachments),
                    requested=len(uploads),
                )
                await self.discard(attachments)
                raise

            logfire.info("Attachments stored", count=len(attachments))
            return attachments

    async def discard(self, attachments: Iterable[Attachment]) -> list[str]:
        """Delete attachment files, never raising.

        Failures are logged and reported back instead of propagated.

        Args:
            attachments: Attachments whose files should be deleted

        Returns:
            URLs that could not be deleted
        """
        return await self.discard_urls(a.url for a in attachments)

    async def discard_urls(self, urls: Iterable[str]) -> list[str]:
        """Delete files by URL, never raising.

        Returns:
            URLs that could not be deleted
        """
        failed = []
        for url in urls:
            try:
                await self.store.delete(url)
            except Exception as e:
                logfire.warn("Attachment file deletion failed", url=url, error=str(e))
                failed.append(url)
        return failed

    async def find_orphans(
        self, referenced: set[str], now: datetime | None = None
    ) -> list[str]:
        """Find stored files that no comment references.

        Files younger than the grace period are skipped, they may belong
        to a comment being created right now.

        Args:
            referenced: URLs referenced by comment records
            now: Reference time (defaults to the current time)

        Returns:
            URLs of orphaned files
        """
        now = now or utcnow()
        cutoff = now - timedelta(seconds=self.settings.orphan_grace_period_seconds)
        stored = await self.store.list_stored()
        return [
            obj.url
            for obj in stored
            if obj.url not in referenced and obj.modified_at <= cutoff
        ]
