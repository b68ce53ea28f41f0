# Standard library imports
from dataclasses import dataclass

# Local application imports
from ..constants import SUPPORTED_IMAGE_FORMATS, IMAGE_MIME_TYPES
from ..errors import InvalidImageError


@dataclass(frozen=True)
class CapturedImage:
    """
    One encoded still image taken from a camera or a browser upload.

    Created per capture action and discarded once it has been sent to the
    face search service.
    """
    data: bytes
    format: str

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.data:
            raise InvalidImageError("Captured image is empty")
        if self.format not in SUPPORTED_IMAGE_FORMATS:
            raise InvalidImageError(f"Unsupported image format: {self.format}")

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def mime_type(self) -> str:
        return IMAGE_MIME_TYPES[self.format]
