# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
import httpx

# Local application imports
from ...domain.constants import MatchFields
from ...domain.errors import RemoteServiceError

logger = logging.getLogger(__name__)


class BaseApiClient:
    """
    Base class for clients of the remote search services.

    Holds the endpoint URL, the API key and the injected ``httpx.AsyncClient``,
    and provides the shared error-body parsing.
    """

    API_KEY_HEADER = "x-api-key"
    SERVICE_NAME = "remote service"

    def __init__(self, http_client: httpx.AsyncClient, url: str, api_key: str):
        """
        Initialize base API client.

        Args:
            http_client: Client owned by the application lifespan.
            url: Endpoint URL of the remote service.
            api_key: Credential sent in the ``x-api-key`` header.
        """
        self.http_client = http_client
        self.url = url
        self.api_key = api_key

    def _headers(self) -> Dict[str, str]:
        return {
            self.API_KEY_HEADER: self.api_key,
            "accept": "application/json",
        }

    @staticmethod
    def _error_details(response: httpx.Response) -> Dict[str, str]:
        """
        Pull the machine-readable code and message from an error response.

        Missing or non-JSON bodies yield empty strings.
        """
        try:
            body = response.json()
        except ValueError:
            return {"code": "", "message": response.text[:200]}
        if not isinstance(body, dict):
            return {"code": "", "message": ""}
        error = body.get("error", body)
        if not isinstance(error, dict):
            return {"code": str(error), "message": ""}
        return {
            "code": str(error.get(MatchFields.ERROR_CODE) or error.get("__type") or ""),
            "message": str(error.get(MatchFields.ERROR_MESSAGE) or error.get("Message") or ""),
        }

    def _parse_json(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{self.SERVICE_NAME} returned a non-JSON body: {response.text[:200]!r}")
            raise RemoteServiceError(f"{self.SERVICE_NAME} returned a non-JSON body") from e

    async def _send(self, method: str, **kwargs: Any) -> httpx.Response:
        """
        Issue one request, translating transport failures into RemoteServiceError.

        HTTP error statuses are returned to the caller for classification.
        """
        try:
            return await self.http_client.request(method, self.url, headers=self._headers(), **kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout while calling {self.SERVICE_NAME} at {self.url}")
            raise RemoteServiceError(f"Timeout while calling {self.SERVICE_NAME}") from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error calling {self.SERVICE_NAME} at {self.url}: {e}")
            raise RemoteServiceError(f"Could not reach {self.SERVICE_NAME}: {e}") from e

    def _describe(self, response: httpx.Response, details: Optional[Dict[str, str]] = None) -> str:
        details = details or self._error_details(response)
        parts = [f"{self.SERVICE_NAME} responded {response.status_code}"]
        if details.get("code"):
            parts.append(details["code"])
        if details.get("message"):
            parts.append(details["message"])
        return " - ".join(parts)
