from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, Optional, TypeVar
from urllib.parse import urlparse
from urllib.request import url2pathname

from parleychat.domain.errors import InvalidAttachmentFileURL


@dataclass(frozen=True)
class AttachmentId:
    """Identifies an attachment within a message of a channel."""

    cid: str
    message_id: str
    index: int

    @property
    def raw_value(self) -> str:
        return f"{self.cid}/{self.message_id}/{self.index}"

    @classmethod
    def from_raw(cls, raw: str) -> AttachmentId:
        parts = raw.split("/")
        if len(parts) != 3:
            raise ValueError(f"Invalid attachment id: {raw!r}")
        cid, message_id, index = parts
        try:
            return cls(cid=cid, message_id=message_id, index=int(index))
        except ValueError:
            raise ValueError(f"Invalid attachment index in id: {raw!r}") from None

    def __str__(self) -> str:
        return self.raw_value


class AttachmentType(str, Enum):
    """Attachment type tags as they appear on the wire."""

    IMAGE = "image"
    FILE = "file"
    VIDEO = "video"
    AUDIO = "audio"
    GIPHY = "giphy"
    LINK_PREVIEW = "linkPreview"
    VOICE_RECORDING = "voiceRecording"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class LocalAttachmentState(str, Enum):
    """Where a locally added attachment is in its upload lifecycle."""

    UNKNOWN = "unknown"
    PENDING_UPLOAD = "pendingUpload"
    UPLOADING = "uploading"
    UPLOADING_FAILED = "uploadingFailed"
    UPLOADED = "uploaded"


class AttachmentFileType(str, Enum):
    """File types keyed by lowercase extension."""

    GENERIC = "generic"
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    HEIC = "heic"
    PDF = "pdf"
    TXT = "txt"
    ZIP = "zip"
    MP3 = "mp3"
    WAV = "wav"
    AAC = "aac"
    M4A = "m4a"
    MP4 = "mp4"
    MOV = "mov"

    @classmethod
    def from_extension(cls, ext: str) -> AttachmentFileType:
        ext = ext.lower().lstrip(".")
        if ext == "jpg":
            ext = "jpeg"
        try:
            return cls(ext)
        except ValueError:
            return cls.GENERIC

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]


_MIME_TYPES = {
    AttachmentFileType.GENERIC: "application/octet-stream",
    AttachmentFileType.JPEG: "image/jpeg",
    AttachmentFileType.PNG: "image/png",
    AttachmentFileType.GIF: "image/gif",
    AttachmentFileType.HEIC: "image/heic",
    AttachmentFileType.PDF: "application/pdf",
    AttachmentFileType.TXT: "text/plain",
    AttachmentFileType.ZIP: "application/zip",
    AttachmentFileType.MP3: "audio/mpeg",
    AttachmentFileType.WAV: "audio/wav",
    AttachmentFileType.AAC: "audio/aac",
    AttachmentFileType.M4A: "audio/mp4",
    AttachmentFileType.MP4: "video/mp4",
    AttachmentFileType.MOV: "video/quicktime",
}


@dataclass(frozen=True)
class AttachmentFile:
    type: AttachmentFileType
    size: int
    mime_type: str

    @classmethod
    def from_url(cls, url: str) -> AttachmentFile:
        """Read file metadata for a local ``file://`` URL.

        Raises InvalidAttachmentFileURL for any other scheme or a remote host. Filesystem errors
        (missing file, permissions) propagate as-is.
        """
        parsed = urlparse(url)
        if parsed.scheme != "file" or parsed.netloc not in ("", "localhost"):
            raise InvalidAttachmentFileURL(url)

        path = Path(url2pathname(parsed.path))
        file_type = AttachmentFileType.from_extension(path.suffix)
        return cls(
            type=file_type,
            size=path.stat().st_size,
            mime_type=file_type.mime_type,
        )


@dataclass(frozen=True)
class AttachmentUploadingState:
    local_file_url: str
    state: LocalAttachmentState
    file: AttachmentFile


PayloadT = TypeVar("PayloadT")


@dataclass(frozen=True)
class ChatMessageAttachment(Generic[PayloadT]):
    """An attachment of a chat message with a typed payload.

    ``uploading_state`` is only set for attachments added locally that still
    have (or had) a file upload attached to them.
    """

    id: AttachmentId
    type: AttachmentType
    payload: PayloadT
    uploading_state: Optional[AttachmentUploadingState] = None
