"""
Session controller: drives capture → match → select → enrich for one user.

Every action bumps the session generation before its first suspension
point and applies its outcome only if the generation is still the one it
was issued under. A newer capture or select therefore supersedes anything
still in flight: late results are dropped on arrival instead of being
written over newer state.
"""
# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ...domain.errors import CaptureUnavailable, FaceMatchError, RemoteServiceError, SelectionError
from ...domain.gateways import EnrichmentGateway, ImageCaptureSource, MatchGateway
from ...domain.models import SessionError, SessionState, SessionStatus

logger = logging.getLogger(__name__)


class SessionController:
    """
    State machine for one session.

    IDLE -> CAPTURING -> MATCHED -> ENRICHING -> ENRICHED, and ERROR from any
    in-flight step. ``capture`` is accepted from every state, ERROR included.
    Remote failures never escape ``capture``/``select``; they become the
    ERROR state carrying the failure kind.
    """

    def __init__(
        self,
        match_gateway: MatchGateway,
        enrichment_gateway: EnrichmentGateway,
        capture_source: Optional[ImageCaptureSource] = None,
        session_id: str = "default",
    ) -> None:
        self.match_gateway = match_gateway
        self.enrichment_gateway = enrichment_gateway
        self.capture_source = capture_source
        self.session_id = session_id
        self._state = SessionState()

    def view_info(self) -> SessionState:
        """Return the current snapshot: candidates, selection and enrichment."""
        return self._state

    def _begin(self, state: SessionState) -> int:
        generation = self._state.generation + 1
        self._state = state.evolve(generation=generation)
        logger.debug(f"Session {self.session_id}: -> {state.status.value} (generation {generation})")
        return generation

    def _finish(self, generation: int, action: str, **changes) -> bool:
        if generation != self._state.generation:
            logger.info(
                f"Session {self.session_id}: dropping stale {action} result "
                f"(generation {generation}, current {self._state.generation})"
            )
            return False
        self._state = self._state.evolve(**changes)
        logger.debug(f"Session {self.session_id}: -> {self._state.status.value} (generation {generation})")
        return True

    def _fail(self, generation: int, action: str, error: FaceMatchError) -> None:
        if self._finish(
            generation,
            action,
            status=SessionStatus.ERROR,
            error=SessionError(kind=error.kind, message=str(error)),
        ):
            logger.warning(f"Session {self.session_id}: {action} failed with {error.kind}: {error}")

    def _fail_unexpected(self, generation: int, action: str, error: Exception) -> None:
        logger.error(
            f"Session {self.session_id}: unexpected {type(error).__name__} during {action}: {error}",
            exc_info=True,
        )
        self._fail(generation, action, RemoteServiceError(f"Unexpected {type(error).__name__}: {error}"))

    async def capture(self, source: Optional[ImageCaptureSource] = None) -> SessionState:
        """
        Capture an image and search for matching faces.

        Discards all previous candidates, selection and enrichment before
        anything is awaited.

        Args:
            source: Capture source for this call; defaults to the session's own source

        Returns:
            Snapshot after the capture settled (or the newer state if it was superseded)
        """
        generation = self._begin(SessionState(status=SessionStatus.CAPTURING))
        source = source or self.capture_source

        try:
            if source is None:
                raise CaptureUnavailable("No capture source configured")
            image = await asyncio.to_thread(source.capture)
            candidates = await self.match_gateway.find_matches(image)
        except FaceMatchError as error:
            self._fail(generation, "capture", error)
            return self._state
        except Exception as error:
            self._fail_unexpected(generation, "capture", error)
            return self._state

        if self._finish(
            generation,
            "capture",
            status=SessionStatus.MATCHED,
            candidates=tuple(candidates),
        ):
            logger.info(f"Session {self.session_id}: matched {len(candidates)} candidate(s)")
        return self._state

    async def select(self, match_id: str) -> SessionState:
        """
        Select a candidate from the current capture and enrich it.

        Args:
            match_id: Id of one of the current candidates

        Returns:
            Snapshot after the lookup settled (or the newer state if it was superseded)

        Raises:
            SelectionError: no settled capture, or match_id is not a current candidate
        """
        current = self._state
        if current.status in (SessionStatus.IDLE, SessionStatus.CAPTURING):
            raise SelectionError(f"Cannot select while session is {current.status.value}")

        candidate = current.find_candidate(match_id)
        if candidate is None:
            raise SelectionError(f"Match {match_id!r} is not a candidate of the current capture")

        generation = self._begin(
            current.evolve(
                status=SessionStatus.ENRICHING,
                selected=candidate,
                enrichment=None,
                error=None,
            )
        )

        try:
            enrichment = await self.enrichment_gateway.lookup(candidate.match_id)
        except FaceMatchError as error:
            self._fail(generation, "select", error)
            return self._state
        except Exception as error:
            self._fail_unexpected(generation, "select", error)
            return self._state

        if self._finish(generation, "select", status=SessionStatus.ENRICHED, enrichment=enrichment):
            logger.info(f"Session {self.session_id}: enriched match {match_id}")
        return self._state
