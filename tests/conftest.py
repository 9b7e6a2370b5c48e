"""Pytest configuration and fixtures."""

import pytest

from parleychat.domain.entities.attachment import AttachmentId
from parleychat.infrastructure.settings import get_settings
from parleychat.testtools.assets import RESOURCES_DIR, YODA_IMAGE_NAME


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def attachment_id() -> AttachmentId:
    return AttachmentId(cid="messaging:general", message_id="msg-1", index=0)


@pytest.fixture
def sample_image_url() -> str:
    return (RESOURCES_DIR / YODA_IMAGE_NAME).resolve().as_uri()
