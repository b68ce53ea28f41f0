from __future__ import annotations

import logging
import time
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from ...domain.errors import SessionNotFoundError
from .session_controller import SessionController

logger = logging.getLogger(__name__)


@dataclass
class _SessionEntry:
    controller: SessionController
    last_seen: float


class SessionRegistry:
    """
    Live session controllers keyed by an opaque session id.

    Sessions idle for longer than ``ttl_seconds`` are evicted whenever the
    registry is touched; once ``max_sessions`` is reached the least recently
    used session makes room for a new one.
    """

    def __init__(
        self,
        controller_factory: Callable[[str], SessionController],
        ttl_seconds: float = 1800.0,
        max_sessions: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._controller_factory = controller_factory
        self._ttl_seconds = ttl_seconds
        self._max_sessions = max(1, max_sessions)
        self._clock = clock
        self._sessions: "OrderedDict[str, _SessionEntry]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def _evict_expired(self, now: float) -> None:
        expired = [sid for sid, entry in self._sessions.items() if now - entry.last_seen > self._ttl_seconds]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info(f"Evicted {len(expired)} idle session(s)")

    def create(self, session_id: Optional[str] = None) -> SessionController:
        """Start a new session and return its controller."""
        now = self._clock()
        self._evict_expired(now)
        while len(self._sessions) >= self._max_sessions:
            oldest, _ = self._sessions.popitem(last=False)
            logger.info(f"Session limit reached; evicted least recently used session {oldest}")

        session_id = session_id or uuid.uuid4().hex
        controller = self._controller_factory(session_id)
        self._sessions[session_id] = _SessionEntry(controller=controller, last_seen=now)
        logger.info(f"Created session {session_id}")
        return controller

    def get(self, session_id: str) -> SessionController:
        """
        Return the controller for a live session and mark it as used.

        Raises:
            SessionNotFoundError: unknown or expired session id
        """
        now = self._clock()
        self._evict_expired(now)
        entry = self._sessions.get(session_id)
        if entry is None:
            raise SessionNotFoundError(f"Session {session_id} not found")
        entry.last_seen = now
        self._sessions.move_to_end(session_id)
        return entry.controller

    def discard(self, session_id: str) -> bool:
        """Forget a session. Returns True if it existed."""
        removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info(f"Discarded session {session_id}")
        return removed
