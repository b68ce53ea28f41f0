from .session_controller import SessionController
from .session_registry import SessionRegistry

__all__ = ["SessionController", "SessionRegistry"]
