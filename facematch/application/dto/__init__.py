from .match_dto import ImageRequest, MatchCandidateResponse, MatchSearchResponse
from .session_dto import (
    CaptureRequest,
    SelectRequest,
    SessionErrorResponse,
    SessionResponse,
)

__all__ = [
    "ImageRequest",
    "MatchCandidateResponse",
    "MatchSearchResponse",
    "CaptureRequest",
    "SelectRequest",
    "SessionErrorResponse",
    "SessionResponse",
]
