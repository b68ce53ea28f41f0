"""External service clients for communicating with the remote search services"""

from .base_api_client import BaseApiClient
from .face_search_client import FaceSearchClient
from .search_client import SearchClient

__all__ = [
    "BaseApiClient",
    "FaceSearchClient",
    "SearchClient",
]
