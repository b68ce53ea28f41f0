# Standard library imports
from dataclasses import dataclass

# Local application imports
from ..constants import MIN_SIMILARITY_SCORE, MAX_SIMILARITY_SCORE


@dataclass(frozen=True)
class MatchCandidate:
    """
    A face record the face search service judged similar to the query image.

    Candidates arrive already ranked by descending similarity; nothing in
    this package reorders them.
    """
    match_id: str
    similarity_score: float
    thumbnail: bytes = b""

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.match_id:
            raise ValueError("Match ID is required")
        if not MIN_SIMILARITY_SCORE <= self.similarity_score <= MAX_SIMILARITY_SCORE:
            raise ValueError(
                f"Similarity score {self.similarity_score} outside "
                f"[{MIN_SIMILARITY_SCORE}, {MAX_SIMILARITY_SCORE}]"
            )
