"""
Shared constants for captured images.

Used by the capture sources, the face search client and the API layer.
"""

# -----------------------------------------------------------------------------
# Image formats
# -----------------------------------------------------------------------------
JPEG = "jpeg"
PNG = "png"
WEBP = "webp"

SUPPORTED_IMAGE_FORMATS = frozenset({JPEG, PNG, WEBP})

# Pillow reports formats upper-case ("JPEG", "PNG", "WEBP")
PIL_FORMAT_MAP = {
    "JPEG": JPEG,
    "PNG": PNG,
    "WEBP": WEBP,
}

IMAGE_MIME_TYPES = {
    JPEG: "image/jpeg",
    PNG: "image/png",
    WEBP: "image/webp",
}

# -----------------------------------------------------------------------------
# Similarity scores (percent, as reported by the face search service)
# -----------------------------------------------------------------------------
MIN_SIMILARITY_SCORE = 0.0
MAX_SIMILARITY_SCORE = 100.0
