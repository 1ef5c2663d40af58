"""Domain value objects for Huddle.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from huddle.domain.value.common import ValueObject


class AttachmentType(str, Enum):
    """Kind of file attached to a comment."""

    IMAGE = "image"
    FILE = "file"

    @classmethod
    def from_mimetype(cls, mimetype: str) -> "AttachmentType":
        """Classify a MIME type."""
        return cls.IMAGE if mimetype.startswith("image/") else cls.FILE


class UploadedFile(ValueObject):
    """A file received from a client, not yet stored."""

    filename: str
    mimetype: str
    data: bytes = Field(repr=False)

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, v: str) -> str:
        """Strip any client-side directory components."""
        name = v.replace("\\", "/").rsplit("/", 1)[-1].strip()
        if not name:
            raise ValueError("Filename must not be empty")
        return name

    @property
    def size(self) -> int:
        """Size in bytes."""
        return len(self.data)


class StoredFile(ValueObject):
    """Location descriptor returned by the attachment store."""

    url: str
    filename: str  # Original client filename
    size: int = Field(ge=0)
    mimetype: str


class StoredObject(ValueObject):
    """A file currently held by the attachment store."""

    url: str
    modified_at: datetime
