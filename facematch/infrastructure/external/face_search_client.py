# Standard library imports
import base64
import binascii
import logging
from typing import Any, Dict, List

# External package imports
import httpx

# Local application imports
from .base_api_client import BaseApiClient
from ...domain.constants import MatchFields
from ...domain.errors import AuthError, InvalidImageError, RemoteServiceError
from ...domain.gateways import MatchGateway
from ...domain.models import CapturedImage, MatchCandidate

logger = logging.getLogger(__name__)


# Error codes are matched case-insensitively as substrings
_AUTH_ERROR_CODES = (
    "accessdenied",
    "unauthorized",
    "invalidsignature",
    "unrecognizedclient",
    "expiredtoken",
    "auth_error",
)
_IMAGE_ERROR_CODES = (
    "invalidimage",
    "invalid_image",
    "imagetoolarge",
    "image_too_large",
)

_AUTH_STATUSES = frozenset({401, 403})
_IMAGE_STATUSES = frozenset({400, 413, 415, 422})


class FaceSearchClient(BaseApiClient, MatchGateway):
    """
    HTTP client for the external face search service.

    Sends a captured image to a pre-existing, externally managed collection
    and returns the ranked candidate list exactly as the service ordered it.
    """

    SERVICE_NAME = "face search service"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        url: str,
        api_key: str,
        collection_id: str,
        region: str = "us-east-1",
        max_matches: int = 10,
        threshold: float = 80.0,
        max_image_bytes: int = 5 * 1024 * 1024,
    ):
        super().__init__(http_client, url, api_key)
        self.collection_id = collection_id
        self.region = region
        self.max_matches = max_matches
        self.threshold = threshold
        self.max_image_bytes = max_image_bytes

    def _headers(self) -> Dict[str, str]:
        headers = super()._headers()
        headers["x-region"] = self.region
        return headers

    def _validate_image(self, image: CapturedImage) -> None:
        if not image.data:
            raise InvalidImageError("Image is empty")
        if image.size > self.max_image_bytes:
            raise InvalidImageError(
                f"Image is {image.size} bytes; the face search service accepts at most "
                f"{self.max_image_bytes} bytes"
            )

    def _raise_for_error(self, response: httpx.Response) -> None:
        """Map an error response onto the failure taxonomy."""
        details = self._error_details(response)
        code = details["code"].lower()
        message = self._describe(response, details)

        if any(marker in code for marker in _AUTH_ERROR_CODES):
            raise AuthError(message)
        if any(marker in code for marker in _IMAGE_ERROR_CODES):
            raise InvalidImageError(message)
        if response.status_code in _AUTH_STATUSES:
            raise AuthError(message)
        if response.status_code in _IMAGE_STATUSES:
            raise InvalidImageError(message)
        raise RemoteServiceError(message)

    @staticmethod
    def _decode_thumbnail(value: Any) -> bytes:
        """Decode a base64 thumbnail; anything undecodable degrades to empty bytes."""
        if not value:
            return b""
        if not isinstance(value, str):
            logger.warning(f"Ignoring non-string thumbnail of type {type(value).__name__}")
            return b""
        payload = value.strip()
        if payload.startswith("data:"):
            payload = payload.partition(",")[2]
        # Services commonly wrap base64 at 76 columns
        payload = "".join(payload.split())
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.warning(f"Ignoring thumbnail that is not valid base64: {e}")
            return b""

    @staticmethod
    def _parse_entry(entry: Any) -> MatchCandidate:
        if not isinstance(entry, dict):
            raise RemoteServiceError(f"Malformed match entry: {entry!r}")
        match_id = entry.get(MatchFields.MATCH_ID)
        if not isinstance(match_id, str) or not match_id.strip():
            raise RemoteServiceError(f"Match entry has no usable matchId: {match_id!r}")
        score = entry.get(MatchFields.SIMILARITY_SCORE)
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise RemoteServiceError(f"Match {match_id} has a non-numeric similarityScore: {score!r}")
        try:
            return MatchCandidate(
                match_id=match_id,
                similarity_score=float(score),
                thumbnail=FaceSearchClient._decode_thumbnail(entry.get(MatchFields.THUMBNAIL)),
            )
        except (TypeError, ValueError) as e:
            raise RemoteServiceError(f"Malformed match entry: {e}") from e

    def _parse_matches(self, body: Any) -> List[MatchCandidate]:
        if not isinstance(body, dict) or not isinstance(body.get(MatchFields.MATCHES), list):
            raise RemoteServiceError("Face search response has no 'matches' list")
        return [self._parse_entry(entry) for entry in body[MatchFields.MATCHES]]

    async def find_matches(self, image: CapturedImage) -> List[MatchCandidate]:
        """
        Search the configured collection for faces similar to ``image``.

        Args:
            image: Captured still image

        Returns:
            Candidates in the order the service ranked them; possibly empty

        Raises:
            InvalidImageError: image empty, too large, or rejected remotely
            AuthError: credentials rejected
            RemoteServiceError: any other failure
        """
        self._validate_image(image)

        payload = {
            MatchFields.IMAGE: base64.b64encode(image.data).decode("ascii"),
            MatchFields.COLLECTION_ID: self.collection_id,
            MatchFields.MAX_MATCHES: self.max_matches,
            MatchFields.THRESHOLD: self.threshold,
        }

        logger.info(
            f"Searching collection {self.collection_id} with {image.size} byte {image.format} image"
        )
        response = await self._send("POST", json=payload)
        if response.is_error:
            logger.error(f"Face search failed: {response.status_code} - {response.text[:200]}")
            self._raise_for_error(response)

        candidates = self._parse_matches(self._parse_json(response))
        logger.info(f"Face search returned {len(candidates)} candidate(s)")
        return candidates
