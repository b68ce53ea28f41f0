from abc import ABC, abstractmethod
from ..models.captured_image import CapturedImage


class ImageCaptureSource(ABC):
    """Gateway interface - obtains one still image on demand"""

    @abstractmethod
    def capture(self) -> CapturedImage:
        """
        Take a single still image.

        Raises:
            CaptureUnavailable: no device accessible or no frame produced
        """
        pass
