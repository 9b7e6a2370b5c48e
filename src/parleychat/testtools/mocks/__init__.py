"""Mock chat model values."""

from parleychat.testtools.mocks.attachments import image_attachment_mock, unique_attachment_id

__all__ = [
    "image_attachment_mock",
    "unique_attachment_id",
]
