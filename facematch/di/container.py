# External package imports
import httpx

# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import GatewayProvider, SessionProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    One container is built per application from an explicit Settings
    instance and the lifespan-owned HTTP client; nothing here is a
    process-wide global.

    Registration order is important:
    1. Settings and HTTP client (constructor arguments)
    2. Gateways (GatewayProvider) - depend on settings and the HTTP client
    3. Sessions (SessionProvider) - depend on gateways
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient) -> None:
        super().__init__()
        self.register_singleton(Settings, settings)
        self.register_singleton(httpx.AsyncClient, http_client)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: gateways → sessions
        """
        GatewayProvider.register(self)
        SessionProvider.register(self)
