from .captured_image import CapturedImage
from .match_candidate import MatchCandidate
from .enrichment_result import EnrichmentResult
from .session_state import SessionState, SessionStatus, SessionError

__all__ = [
    "CapturedImage",
    "MatchCandidate",
    "EnrichmentResult",
    "SessionState",
    "SessionStatus",
    "SessionError",
]
