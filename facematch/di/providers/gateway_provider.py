from typing import TYPE_CHECKING

import httpx

from ...core.config import Settings
from ...domain.gateways import EnrichmentGateway, ImageCaptureSource, MatchGateway
from ...infrastructure.capture import WebcamCaptureSource
from ...infrastructure.external import FaceSearchClient, SearchClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class GatewayProvider:
    """Gateway provider - registers the capture source and both remote clients"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register gateways as singletons bound to the shared HTTP client.
        """
        settings = container.get(Settings)
        http_client = container.get(httpx.AsyncClient)

        container.register_singleton(
            MatchGateway,
            FaceSearchClient(
                http_client=http_client,
                url=settings.face_search_url,
                api_key=settings.face_search_api_key,
                collection_id=settings.face_search_collection_id,
                region=settings.face_search_region,
                max_matches=settings.face_search_max_matches,
                threshold=settings.face_search_threshold,
                max_image_bytes=settings.max_image_bytes,
            ),
        )

        container.register_singleton(
            EnrichmentGateway,
            SearchClient(
                http_client=http_client,
                url=settings.enrichment_search_url,
                api_key=settings.enrichment_search_api_key,
            ),
        )

        # Server-attached camera, used when a capture request carries no image
        container.register_singleton(
            ImageCaptureSource,
            WebcamCaptureSource(
                device_index=settings.camera_device_index,
                jpeg_quality=settings.jpeg_quality,
            ),
        )
