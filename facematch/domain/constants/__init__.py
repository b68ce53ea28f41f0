"""Constants for domain model field names and media rules"""

from .match_fields import MatchFields, EnrichmentFields
from .media_constants import (
    JPEG,
    PNG,
    WEBP,
    SUPPORTED_IMAGE_FORMATS,
    PIL_FORMAT_MAP,
    IMAGE_MIME_TYPES,
    MIN_SIMILARITY_SCORE,
    MAX_SIMILARITY_SCORE,
)

__all__ = [
    "MatchFields",
    "EnrichmentFields",
    "JPEG",
    "PNG",
    "WEBP",
    "SUPPORTED_IMAGE_FORMATS",
    "PIL_FORMAT_MAP",
    "IMAGE_MIME_TYPES",
    "MIN_SIMILARITY_SCORE",
    "MAX_SIMILARITY_SCORE",
]
