"""Attachment payload models and their wire encoding."""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from parleychat.domain.entities.attachment import AttachmentType, ChatMessageAttachment

RawJSON = Any


class ImageAttachmentPayload(BaseModel):
    """Content of an image attachment."""

    model_config = ConfigDict(frozen=True)

    type: ClassVar[AttachmentType] = AttachmentType.IMAGE

    title: str | None = None
    image_remote_url: str
    image_preview_remote_url: str
    extra_data: dict[str, RawJSON] | None = None

    @field_validator("extra_data")
    @classmethod
    def _own_extra_data(cls, value: dict[str, RawJSON] | None) -> Mapping[str, RawJSON] | None:
        # Read-only view over a private deep copy
        if value is None:
            return None
        return MappingProxyType(copy.deepcopy(value))

    def __hash__(self) -> int:
        # extra_data is left out; it may hold unhashable JSON values
        return hash((self.type, self.title, self.image_remote_url, self.image_preview_remote_url))

    def to_raw(self) -> dict[str, RawJSON]:
        """Encode to the wire shape, with extra data flattened alongside."""
        raw: dict[str, RawJSON] = copy.deepcopy(dict(self.extra_data or {}))
        if self.title is not None:
            raw["title"] = self.title
        raw["image_url"] = self.image_remote_url
        raw["thumb_url"] = self.image_preview_remote_url
        return raw

    @classmethod
    def from_raw(cls, raw: Mapping[str, RawJSON]) -> ImageAttachmentPayload:
        data = dict(raw)
        data.pop("type", None)
        title = data.pop("title", None)

        # Older clients send asset_url; some only send a thumbnail
        image_url = data.pop("image_url", None)
        asset_url = data.pop("asset_url", None)
        thumb_url = data.pop("thumb_url", None)
        image_url = image_url or asset_url or thumb_url

        return cls(
            title=title,
            image_remote_url=image_url,
            image_preview_remote_url=thumb_url or image_url,
            extra_data=data or None,
        )


ChatMessageImageAttachment = ChatMessageAttachment[ImageAttachmentPayload]
