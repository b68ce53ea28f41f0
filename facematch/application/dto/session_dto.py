from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ...domain.models import SessionState
from .match_dto import MatchCandidateResponse


class CaptureRequest(BaseModel):
    """DTO for a capture action; without an image the server camera is used"""
    image: Optional[str] = None


class SelectRequest(BaseModel):
    """DTO for selecting one of the current candidates"""
    model_config = ConfigDict(populate_by_name=True)

    match_id: str = Field(..., alias="matchId", min_length=1)


class SessionErrorResponse(BaseModel):
    """DTO for the failure carried by the error state"""
    kind: str
    message: str = ""


class SessionResponse(BaseModel):
    """DTO for a session snapshot"""
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    status: str
    candidates: List[MatchCandidateResponse] = Field(default_factory=list)
    selected: Optional[MatchCandidateResponse] = None
    enrichment: Optional[Dict[str, Any]] = None
    error: Optional[SessionErrorResponse] = None

    @classmethod
    def from_state(cls, session_id: str, state: SessionState) -> "SessionResponse":
        return cls(
            session_id=session_id,
            status=state.status.value,
            candidates=[MatchCandidateResponse.from_domain(c) for c in state.candidates],
            selected=MatchCandidateResponse.from_domain(state.selected) if state.selected else None,
            enrichment=state.enrichment.to_dict() if state.enrichment else None,
            error=(
                SessionErrorResponse(kind=state.error.kind, message=state.error.message)
                if state.error
                else None
            ),
        )
