# Standard library imports
import logging
from typing import Any, Dict

# External package imports
import httpx

# Local application imports
from .base_api_client import BaseApiClient
from ...domain.constants import EnrichmentFields
from ...domain.errors import NotFoundError, RemoteServiceError
from ...domain.gateways import EnrichmentGateway
from ...domain.models import EnrichmentResult

logger = logging.getLogger(__name__)


class SearchClient(BaseApiClient, EnrichmentGateway):
    """
    HTTP client for the external search service used to enrich a match.

    The response schema belongs to the search service; it is passed through
    untouched apart from wrapping top-level lists as ``{"results": [...]}``.
    """

    SERVICE_NAME = "enrichment search service"

    @staticmethod
    def _is_empty(record: Dict[str, Any]) -> bool:
        if not record:
            return True
        results = record.get(EnrichmentFields.RESULTS)
        return isinstance(results, list) and not results

    async def lookup(self, match_id: str) -> EnrichmentResult:
        """
        Look up information for a match id.

        Args:
            match_id: Opaque id previously returned by the face search service

        Returns:
            EnrichmentResult holding the service's record

        Raises:
            ValueError: match_id is empty
            NotFoundError: the search produced no results
            RemoteServiceError: the call itself failed
        """
        if not match_id:
            raise ValueError("Match ID is required")

        logger.info(f"Looking up match {match_id}")
        response = await self._send("GET", params={EnrichmentFields.MATCH_ID: match_id})

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info(f"No enrichment results for match {match_id}")
            raise NotFoundError(f"No results for match {match_id}")
        if response.is_error:
            logger.error(f"Enrichment lookup failed: {response.status_code} - {response.text[:200]}")
            raise RemoteServiceError(self._describe(response))

        body = self._parse_json(response)
        if isinstance(body, list):
            body = {EnrichmentFields.RESULTS: body}
        if not isinstance(body, dict):
            raise RemoteServiceError(f"Unexpected enrichment response type: {type(body).__name__}")
        if self._is_empty(body):
            logger.info(f"No enrichment results for match {match_id}")
            raise NotFoundError(f"No results for match {match_id}")

        logger.info(f"Enrichment lookup for match {match_id} returned {len(body)} field(s)")
        return EnrichmentResult(match_id=match_id, data=body)
