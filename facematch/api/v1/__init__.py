from .faces_controller import router as faces_router
from .health_controller import router as health_router
from .sessions_controller import router as sessions_router


__all__ = ["faces_router", "health_router", "sessions_router"]
