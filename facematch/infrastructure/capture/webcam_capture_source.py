"""
Webcam Capture Source
---------------------

Grabs a single frame from a camera attached to the server and encodes it
as JPEG. The device is opened per capture and released straight after, so
no handle is held between user actions.
"""

import logging
from typing import Callable, Optional

from ...domain.constants import JPEG
from ...domain.errors import CaptureUnavailable
from ...domain.gateways import ImageCaptureSource
from ...domain.models import CapturedImage

try:
    import cv2  # type: ignore
except ImportError:
    cv2 = None  # type: ignore[assignment]

_CV2_ERRORS = (cv2.error,) if cv2 is not None else ()

logger = logging.getLogger(__name__)


class WebcamCaptureSource(ImageCaptureSource):
    """
    Source that reads one frame from a local camera device.
    Raises CaptureUnavailable when the device cannot be opened or yields no frame.
    """

    def __init__(
        self,
        device_index: int = 0,
        jpeg_quality: int = 90,
        warmup_frames: int = 2,
        capture_factory: Optional[Callable[[int], "cv2.VideoCapture"]] = None,
    ):
        """
        Args:
            device_index: OpenCV camera index (0 is the default webcam).
            jpeg_quality: JPEG quality 1-100 for the encoded frame.
            warmup_frames: Frames discarded first; many webcams return a dark first frame.
            capture_factory: Opens the device; defaults to cv2.VideoCapture.
        """
        self.device_index = device_index
        self.jpeg_quality = jpeg_quality
        self.warmup_frames = max(0, warmup_frames)
        self._capture_factory = capture_factory

    def _open(self):
        if self._capture_factory is not None:
            return self._capture_factory(self.device_index)
        if cv2 is None:
            raise CaptureUnavailable("OpenCV (cv2) is not available; cannot open camera")
        return cv2.VideoCapture(self.device_index)

    def capture(self) -> CapturedImage:
        cap = None
        try:
            cap = self._open()
            if cap is None or not cap.isOpened():
                raise CaptureUnavailable(f"Camera device {self.device_index} is not accessible")

            for _ in range(self.warmup_frames):
                cap.grab()

            ok, frame = cap.read()
            if not ok or frame is None or getattr(frame, "size", 0) == 0:
                raise CaptureUnavailable(f"Camera device {self.device_index} produced no frame")

            if cv2 is None:
                raise CaptureUnavailable("OpenCV (cv2) is not available; cannot encode frame")
            ok, buffer = cv2.imencode(".jpg", frame, [cv2.IMWRITE_JPEG_QUALITY, self.jpeg_quality])
            if not ok:
                raise CaptureUnavailable("Failed to encode camera frame as JPEG")

            data = buffer.tobytes()
            logger.info(f"Captured {len(data)} byte JPEG from camera device {self.device_index}")
            return CapturedImage(data=data, format=JPEG)
        except _CV2_ERRORS as e:
            logger.error(f"OpenCV error on camera device {self.device_index}: {e}")
            raise CaptureUnavailable(f"Camera device {self.device_index} failed: {e}") from e
        finally:
            if cap is not None:
                cap.release()
