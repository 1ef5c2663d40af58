"""Attachment storage adapter."""

from .local import LocalAttachmentStore, MockAttachmentStore

__all__ = ["LocalAttachmentStore", "MockAttachmentStore"]
