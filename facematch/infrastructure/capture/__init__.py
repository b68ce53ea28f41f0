"""Image capture sources: server-attached webcam and browser uploads"""

from .uploaded_image_source import UploadedImageSource
from .webcam_capture_source import WebcamCaptureSource

__all__ = [
    "UploadedImageSource",
    "WebcamCaptureSource",
]
