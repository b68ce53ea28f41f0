from .image_capture_source import ImageCaptureSource
from .match_gateway import MatchGateway
from .enrichment_gateway import EnrichmentGateway

__all__ = ["ImageCaptureSource", "MatchGateway", "EnrichmentGateway"]
