from typing import TYPE_CHECKING

from ...application.services import SessionController, SessionRegistry
from ...core.config import Settings
from ...domain.gateways import EnrichmentGateway, ImageCaptureSource, MatchGateway

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SessionProvider:
    """Session provider - registers the session registry and controller factory"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the SessionRegistry singleton.
        Controllers are created on demand, one per session id.
        """
        settings = container.get(Settings)

        def build_controller(session_id: str) -> SessionController:
            return SessionController(
                match_gateway=container.get(MatchGateway),
                enrichment_gateway=container.get(EnrichmentGateway),
                capture_source=container.get(ImageCaptureSource),
                session_id=session_id,
            )

        container.register_singleton(
            SessionRegistry,
            SessionRegistry(
                controller_factory=build_controller,
                ttl_seconds=settings.session_ttl_seconds,
                max_sessions=settings.max_sessions,
            ),
        )
