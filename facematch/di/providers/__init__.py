from .gateway_provider import GatewayProvider
from .session_provider import SessionProvider


__all__ = [
    "GatewayProvider",
    "SessionProvider",
]
