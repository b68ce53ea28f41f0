from abc import ABC, abstractmethod
from ..models.enrichment_result import EnrichmentResult


class EnrichmentGateway(ABC):
    """Gateway interface - turns a match id into human-readable information"""

    @abstractmethod
    async def lookup(self, match_id: str) -> EnrichmentResult:
        """
        Look up a match id returned by the face search service.

        Raises:
            NotFoundError: the search succeeded but produced no results
            RemoteServiceError: the call itself failed
        """
        pass
