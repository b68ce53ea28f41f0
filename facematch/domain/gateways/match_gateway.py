from abc import ABC, abstractmethod
from typing import List
from ..models.captured_image import CapturedImage
from ..models.match_candidate import MatchCandidate


class MatchGateway(ABC):
    """Gateway interface - relays an image to the face search service"""

    @abstractmethod
    async def find_matches(self, image: CapturedImage) -> List[MatchCandidate]:
        """
        Return candidates ranked by descending similarity, as received.

        An empty list is a valid result.

        Raises:
            InvalidImageError, AuthError, RemoteServiceError
        """
        pass
