"""Attachment store backed by the local filesystem.

Files are written under ``{upload_root}/{comment_folder}`` with a random
name and served by the API under ``{url_prefix}/{name}``.
"""

import asyncio
import mimetypes
import os
from datetime import datetime, timezone
from pathlib import Path, PurePosixPath
from uuid import uuid4

import logfire

from huddle.domain.error import StoreUnavailableError
from huddle.domain.service.attachment_service import AttachmentStore
from huddle.domain.value import StoredFile, StoredObject, UploadedFile


class LocalAttachmentStore(AttachmentStore):
    """Stores attachments as files in a local directory."""

    def __init__(self, upload_root: str, comment_folder: str, url_prefix: str):
        """Initialize local store.

        Args:
            upload_root: Base directory for uploaded files
            comment_folder: Sub-directory for comment attachments
            url_prefix: Public URL path the directory is served under
        """
        self.directory = Path(upload_root) / comment_folder
        self.url_prefix = url_prefix.rstrip("/")

    def _generate_name(self, upload: UploadedFile) -> str:
        """Random file name keeping the client's extension."""
        ext = os.path.splitext(upload.filename)[1].lower()
        if not ext:
            ext = mimetypes.guess_extension(upload.mimetype) or ""
        return f"{uuid4().hex}{ext}"

    def _path_for(self, url: str) -> Path | None:
        """Map a public URL back to a path inside the store directory."""
        path = PurePosixPath(url)
        if str(path.parent) != self.url_prefix or path.name in ("", ".", ".."):
            return None
        return self.directory / path.name

    async def store(self, upload: UploadedFile) -> StoredFile:
        """Write an upload to a new file."""
        name = self._generate_name(upload)
        target = self.directory / name

        def _write() -> None:
            self.directory.mkdir(parents=True, exist_ok=True)
            # "xb" fails rather than overwrite an existing file
            with open(target, "xb") as fh:
                fh.write(upload.data)

        try:
            await asyncio.to_thread(_write)
        except OSError as e:
            logfire.error(
                "Failed to write attachment",
                filename=upload.filename,
                path=str(target),
                error=str(e),
            )
            raise StoreUnavailableError("attachment store", "store", str(e)) from e

        url = f"{self.url_prefix}/{name}"
        logfire.debug("Attachment stored", url=url, size=upload.size)
        return StoredFile(
            url=url,
            filename=upload.filename,
            size=upload.size,
            mimetype=upload.mimetype,
        )

    async def delete(self, url: str) -> None:
        """Delete the file behind a URL; missing files are ignored."""
        path = self._path_for(url)
        if path is None:
            logfire.warn("Attachment URL outside store, skipping delete", url=url)
            return

        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            raise StoreUnavailableError("attachment store", "delete", str(e)) from e

    async def list_stored(self) -> list[StoredObject]:
        """List stored files with their modification times."""

        def _scan() -> list[StoredObject]:
            if not self.directory.is_dir():
                return []
            objects = []
            for entry in self.directory.iterdir():
                if not entry.is_file():
                    continue
                modified = datetime.fromtimestamp(
                    entry.stat().st_mtime, tz=timezone.utc
                )
                objects.append(
                    StoredObject(
                        url=f"{self.url_prefix}/{entry.name}", modified_at=modified
                    )
                )
            return objects

        try:
            return await asyncio.to_thread(_scan)
        except OSError as e:
            raise StoreUnavailableError("attachment store", "list", str(e)) from e


class MockAttachmentStore(AttachmentStore):
    """In-memory attachment store for testing.

    Set ``fail_after`` to make every store() call beyond that many
    successful ones fail, and ``fail_deletes`` to make deletes fail.
    """

    def __init__(self, url_prefix: str = "/uploads/comments"):
        self.url_prefix = url_prefix.rstrip("/")
        self.files: dict[str, bytes] = {}
        self.modified: dict[str, datetime] = {}
        self.fail_after: int | None = None
        self.fail_deletes = False
        self._stored_count = 0

    async def store(self, upload: UploadedFile) -> StoredFile:
        """Keep the upload in memory."""
        if self.fail_after is not None and self._stored_count >= self.fail_after:
            raise StoreUnavailableError("attachment store", "store", "mock failure")
        self._stored_count += 1

        url = f"{self.url_prefix}/{uuid4().hex}"
        self.files[url] = upload.data
        self.modified[url] = datetime.now(timezone.utc)
        return StoredFile(
            url=url,
            filename=upload.filename,
            size=upload.size,
            mimetype=upload.mimetype,
        )

    async def delete(self, url: str) -> None:
        """Forget a stored file."""
        if self.fail_deletes:
            raise StoreUnavailableError("attachment store", "delete", "mock failure")
        self.files.pop(url, None)
        self.modified.pop(url, None)

    async def list_stored(self) -> list[StoredObject]:
        """List files held in memory."""
        return [
            StoredObject(url=url, modified_at=self.modified[url]) for url in self.files
        ]
