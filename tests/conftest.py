"""
Shared pytest fixtures for face match backend tests.
"""
from io import BytesIO

import pytest
from PIL import Image

from facematch.core.config import Settings


TEST_ENV = {
    "FACE_SEARCH_URL": "https://faces.test/v1/search",
    "FACE_SEARCH_API_KEY": "test_face_key",
    "FACE_SEARCH_COLLECTION_ID": "test-collection",
    "FACE_SEARCH_REGION": "eu-west-1",
    "ENRICHMENT_SEARCH_URL": "https://search.test/v1/lookup",
    "ENRICHMENT_SEARCH_API_KEY": "test_search_key",
    "HTTP2_ENABLED": "false",
    "MAX_IMAGE_BYTES": "1048576",
}


@pytest.fixture
def test_env():
    """Environment mapping with every required variable set."""
    return dict(TEST_ENV)


@pytest.fixture
def settings(test_env):
    """Validated settings built from ``test_env``."""
    return Settings.from_env(test_env)


def make_image_bytes(fmt: str = "JPEG", size=(32, 32), color=(200, 120, 40)) -> bytes:
    """Encode a solid-colour image with Pillow."""
    buffer = BytesIO()
    Image.new("RGB", size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def jpeg_bytes():
    return make_image_bytes("JPEG")


@pytest.fixture
def png_bytes():
    return make_image_bytes("PNG")


@pytest.fixture
def image_factory():
    """Callable building encoded test images: image_factory("PNG", size=(8, 8))."""
    return make_image_bytes


@pytest.fixture
def tight_pixel_limit(monkeypatch):
    """Lower Pillow's decompression bomb limit so the 32x32 test images exceed it."""
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    return 100
