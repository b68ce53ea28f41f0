# Standard library imports
import logging

# Local application imports
from ...domain.errors import CaptureUnavailable
from ...domain.gateways import ImageCaptureSource
from ...domain.models import CapturedImage
from .image_decoding import decode_base64_image, identify_image_format

logger = logging.getLogger(__name__)


class UploadedImageSource(ImageCaptureSource):
    """
    Capture source for a frame the browser grabbed from the user's webcam.

    The browser does the camera work; this source only validates the
    uploaded bytes and tags their format.
    """

    def __init__(self, data: bytes):
        self._data = data

    @classmethod
    def from_base64(cls, text: str) -> "UploadedImageSource":
        """Build a source from plain base64 or a data URL (raises InvalidImageError)."""
        return cls(decode_base64_image(text))

    def capture(self) -> CapturedImage:
        if not self._data:
            raise CaptureUnavailable("Browser did not supply a webcam frame")
        image_format = identify_image_format(self._data)
        logger.info(f"Accepted uploaded {image_format} frame ({len(self._data)} bytes)")
        return CapturedImage(data=self._data, format=image_format)
