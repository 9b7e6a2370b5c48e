"""Sample assets bundled with the test tools."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from urllib.parse import unquote, urlparse

from loguru import logger

from parleychat.infrastructure.settings import get_settings

RESOURCES_DIR = Path(__file__).parent / "resources"
YODA_IMAGE_NAME = "yoda.jpg"


def assets_dir() -> Path:
    """Directory sample assets are read from."""
    configured = get_settings().test_assets_dir
    if configured is not None:
        logger.debug(f"Using test assets from {configured}")
        return configured
    return RESOURCES_DIR


def local_yoda_image() -> str:
    """File URL of the sample image."""
    return (assets_dir() / YODA_IMAGE_NAME).resolve().as_uri()


def last_path_component(url: str) -> str:
    """File name of the URL's path, percent-decoded."""
    return PurePosixPath(unquote(urlparse(url).path)).name
