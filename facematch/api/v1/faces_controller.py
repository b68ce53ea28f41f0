"""
Relay endpoints for the two remote services.

Stateless: the browser posts its webcam frame to /search and looks a match
up through /lookup. Session-aware flows live in sessions_controller.
"""
# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool

# Local application imports
from ...application.dto.match_dto import ImageRequest, MatchCandidateResponse, MatchSearchResponse
from ...di.container import DIContainer
from ...domain.errors import FaceMatchError, RemoteServiceError
from ...domain.gateways import EnrichmentGateway, MatchGateway
from ...infrastructure.capture import UploadedImageSource
from .dependencies import get_container, to_http_exception

logger = logging.getLogger(__name__)
router = APIRouter(tags=["faces"])


@router.post("/search", response_model=MatchSearchResponse)
async def search_faces(
    request: ImageRequest,
    container: DIContainer = Depends(get_container),
) -> MatchSearchResponse:
    """
    Relay a webcam frame to the face search service.

    Args:
        request: Base64 image or data URL

    Returns:
        MatchSearchResponse with candidates in the service's rank order
    """
    match_gateway = container.get(MatchGateway)
    try:
        image = await run_in_threadpool(UploadedImageSource.from_base64(request.image).capture)
        candidates = await match_gateway.find_matches(image)
    except FaceMatchError as exception:
        raise to_http_exception(exception) from exception
    except Exception as exception:
        logger.error(f"Unexpected error relaying face search: {exception}", exc_info=True)
        raise to_http_exception(RemoteServiceError(f"Unexpected {type(exception).__name__}")) from exception

    return MatchSearchResponse(
        matches=[MatchCandidateResponse.from_domain(c) for c in candidates]
    )


@router.get("/lookup")
async def lookup_match(
    match_id: str = Query(..., alias="matchId", min_length=1),
    container: DIContainer = Depends(get_container),
) -> dict:
    """
    Relay a match id to the enrichment search service.

    Returns:
        Whatever record the search service returned
    """
    enrichment_gateway = container.get(EnrichmentGateway)
    try:
        result = await enrichment_gateway.lookup(match_id)
    except FaceMatchError as exception:
        raise to_http_exception(exception) from exception
    except Exception as exception:
        logger.error(f"Unexpected error relaying lookup for {match_id}: {exception}", exc_info=True)
        raise to_http_exception(RemoteServiceError(f"Unexpected {type(exception).__name__}")) from exception
    return result.to_dict()
