"""Errors raised by the chat client data model."""

from __future__ import annotations


class ClientError(Exception):
    """Base class for errors raised by the chat client."""


class InvalidAttachmentFileURL(ClientError):
    """Raised when attachment file metadata is requested for a non-local URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Attachment file URL must be a local file URL: {url!r}")
