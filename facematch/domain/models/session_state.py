from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from .enrichment_result import EnrichmentResult
from .match_candidate import MatchCandidate


class SessionStatus(str, Enum):
    # IDLE -> CAPTURING -> MATCHED -> ENRICHING -> ENRICHED, ERROR from any in-flight step
    IDLE = "idle"
    CAPTURING = "capturing"
    MATCHED = "matched"
    ENRICHING = "enriching"
    ENRICHED = "enriched"
    ERROR = "error"


@dataclass(frozen=True)
class SessionError:
    """Failure kind and message carried by the ERROR state."""

    kind: str
    message: str = ""


@dataclass(frozen=True)
class SessionState:
    """
    Snapshot of one user's capture/match/enrich progress.

    Snapshots are immutable; the session controller swaps in a new one on
    every transition, so a snapshot handed to a caller never changes.
    """

    status: SessionStatus = SessionStatus.IDLE
    candidates: Tuple[MatchCandidate, ...] = field(default_factory=tuple)
    selected: Optional[MatchCandidate] = None
    enrichment: Optional[EnrichmentResult] = None
    error: Optional[SessionError] = None
    generation: int = 0

    def __post_init__(self) -> None:
        if self.selected is not None and self.selected not in self.candidates:
            raise ValueError("Selected candidate must belong to the current candidates")

    def find_candidate(self, match_id: str) -> Optional[MatchCandidate]:
        for candidate in self.candidates:
            if candidate.match_id == match_id:
                return candidate
        return None

    def evolve(self, **changes) -> SessionState:
        return replace(self, **changes)
