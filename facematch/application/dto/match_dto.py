from typing import List
from pydantic import BaseModel, ConfigDict, Field

from ...domain.models import MatchCandidate
from ...infrastructure.capture.image_decoding import encode_base64


class ImageRequest(BaseModel):
    """DTO for the face search relay: a base64 image or data URL"""
    image: str = Field(..., min_length=1)


class MatchCandidateResponse(BaseModel):
    """DTO for one ranked match; thumbnail is base64 (empty when absent)"""
    model_config = ConfigDict(populate_by_name=True)

    match_id: str = Field(..., alias="matchId")
    similarity_score: float = Field(..., alias="similarityScore")
    thumbnail: str = ""

    @classmethod
    def from_domain(cls, candidate: MatchCandidate) -> "MatchCandidateResponse":
        return cls(
            match_id=candidate.match_id,
            similarity_score=candidate.similarity_score,
            thumbnail=encode_base64(candidate.thumbnail) if candidate.thumbnail else "",
        )


class MatchSearchResponse(BaseModel):
    """DTO for the face search relay response, in service rank order"""
    matches: List[MatchCandidateResponse]
