import pytest
from pydantic import ValidationError

from parleychat.domain.entities.attachment import AttachmentType
from parleychat.domain.entities.payloads import ImageAttachmentPayload


def test_payload_type():
    assert ImageAttachmentPayload.type == AttachmentType.IMAGE


def test_to_raw_flattens_extra_data():
    payload = ImageAttachmentPayload(
        title="yoda.jpg",
        image_remote_url="https://cdn.example.com/yoda.jpg",
        image_preview_remote_url="https://cdn.example.com/yoda_thumb.jpg",
        extra_data={"location": "Dagobah"},
    )

    assert payload.to_raw() == {
        "title": "yoda.jpg",
        "image_url": "https://cdn.example.com/yoda.jpg",
        "thumb_url": "https://cdn.example.com/yoda_thumb.jpg",
        "location": "Dagobah",
    }


def test_to_raw_without_title():
    payload = ImageAttachmentPayload(
        image_remote_url="https://cdn.example.com/yoda.jpg",
        image_preview_remote_url="https://cdn.example.com/yoda.jpg",
    )

    assert "title" not in payload.to_raw()


def test_from_raw():
    payload = ImageAttachmentPayload.from_raw(
        {
            "type": "image",
            "title": "yoda.jpg",
            "image_url": "https://cdn.example.com/yoda.jpg",
            "thumb_url": "https://cdn.example.com/yoda_thumb.jpg",
            "location": "Dagobah",
        }
    )

    assert payload.title == "yoda.jpg"
    assert payload.image_remote_url == "https://cdn.example.com/yoda.jpg"
    assert payload.image_preview_remote_url == "https://cdn.example.com/yoda_thumb.jpg"
    assert payload.extra_data == {"location": "Dagobah"}


def test_from_raw_asset_url_fallback():
    payload = ImageAttachmentPayload.from_raw({"asset_url": "https://cdn.example.com/yoda.jpg"})

    assert payload.image_remote_url == "https://cdn.example.com/yoda.jpg"
    assert payload.image_preview_remote_url == "https://cdn.example.com/yoda.jpg"
    assert payload.title is None
    assert payload.extra_data is None


def test_from_raw_thumb_only():
    payload = ImageAttachmentPayload.from_raw({"thumb_url": "https://cdn.example.com/thumb.jpg"})

    assert payload.image_remote_url == "https://cdn.example.com/thumb.jpg"
    assert payload.image_preview_remote_url == "https://cdn.example.com/thumb.jpg"


def test_from_raw_without_url():
    with pytest.raises(ValidationError):
        ImageAttachmentPayload.from_raw({"title": "nothing here"})


def test_payload_is_frozen():
    payload = ImageAttachmentPayload(
        image_remote_url="https://cdn.example.com/yoda.jpg",
        image_preview_remote_url="https://cdn.example.com/yoda.jpg",
    )

    with pytest.raises(ValidationError):
        payload.title = "changed"


def test_to_raw_returns_independent_copy():
    payload = ImageAttachmentPayload(
        image_remote_url="https://cdn.example.com/yoda.jpg",
        image_preview_remote_url="https://cdn.example.com/yoda.jpg",
        extra_data={"nested": {"a": 1}},
    )

    raw = payload.to_raw()
    raw["nested"]["a"] = 2

    assert payload.extra_data == {"nested": {"a": 1}}
