"""Domain models and entities."""

from parleychat.domain.entities.attachment import (
    AttachmentFile,
    AttachmentFileType,
    AttachmentId,
    AttachmentType,
    AttachmentUploadingState,
    ChatMessageAttachment,
    LocalAttachmentState,
)
from parleychat.domain.entities.payloads import ChatMessageImageAttachment, ImageAttachmentPayload
from parleychat.domain.errors import ClientError, InvalidAttachmentFileURL

__all__ = [
    "AttachmentId",
    "AttachmentType",
    "AttachmentFileType",
    "AttachmentFile",
    "LocalAttachmentState",
    "AttachmentUploadingState",
    "ChatMessageAttachment",
    "ChatMessageImageAttachment",
    "ImageAttachmentPayload",
    "ClientError",
    "InvalidAttachmentFileURL",
]
