"""Attachment mocks for tests."""

from __future__ import annotations

import copy
import random
import uuid
from typing import Any, Mapping, Optional

from loguru import logger

from parleychat.domain.entities.attachment import (
    AttachmentFile,
    AttachmentId,
    AttachmentType,
    AttachmentUploadingState,
    ChatMessageAttachment,
    LocalAttachmentState,
)
from parleychat.domain.entities.payloads import ChatMessageImageAttachment, ImageAttachmentPayload
from parleychat.testtools.assets import last_path_component, local_yoda_image


def unique_attachment_id() -> AttachmentId:
    """Attachment id with a fresh channel and message and a random index."""
    return AttachmentId(
        cid=f"messaging:{uuid.uuid4()}",
        message_id=str(uuid.uuid4()),
        index=random.randrange(100),
    )


def image_attachment_mock(
    id: AttachmentId,
    image_url: Optional[str] = None,
    title: Optional[str] = None,
    local_state: Optional[LocalAttachmentState] = None,
    extra_data: Optional[Mapping[str, Any]] = None,
) -> ChatMessageImageAttachment:
    """Create an image attachment populated with sample data.

    Args:
        id: Attachment identity, used as-is
        image_url: Remote and preview URL, and the local file URL when
                   ``local_state`` is given. Defaults to the sample image.
        title: Defaults to the sample image file name, even when
               ``image_url`` is overridden
        local_state: When given, the attachment gets an uploading state
                     whose file metadata is read from ``image_url``
        extra_data: Payload extra data

    File metadata errors are not handled; an invalid or missing local file
    fails the test right here.
    """
    if image_url is None:
        image_url = local_yoda_image()
    if title is None:
        title = last_path_component(local_yoda_image())

    uploading_state = None
    if local_state is not None:
        uploading_state = AttachmentUploadingState(
            local_file_url=image_url,
            state=local_state,
            file=AttachmentFile.from_url(image_url),
        )

    logger.debug(f"Mock image attachment {id} ({title}, local_state={local_state})")
    return ChatMessageAttachment(
        id=id,
        type=AttachmentType.IMAGE,
        payload=ImageAttachmentPayload(
            title=title,
            image_remote_url=image_url,
            image_preview_remote_url=image_url,
            extra_data=copy.deepcopy(dict(extra_data)) if extra_data is not None else None,
        ),
        uploading_state=uploading_state,
    )
