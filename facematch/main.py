# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import faces_router, health_router, sessions_router
from .core.config import Settings
from .di.container import DIContainer
from .infrastructure.http_client_factory import create_http_client, close_http_client

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup/shutdown events.

        Creates the HTTP client shared by both remote clients, builds the
        dependency container around it and closes the client on shutdown.
        """
        http_client = create_http_client(
            timeout=settings.http_timeout_seconds,
            http2=settings.http2_enabled,
        )
        app.state.container = DIContainer(settings=settings, http_client=http_client)
        logger.info("Dependency container initialized")

        yield

        app.state.container = None
        await close_http_client(http_client)
        logger.info("Application shutdown complete")

    return lifespan


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and validation
    - CORS middleware configuration
    - API route registration

    Args:
        settings: Explicit settings; read from the environment when omitted

    Returns:
        Configured FastAPI application instance

    Raises:
        ConfigurationError: required environment variables are missing
    """
    if settings is None:
        env_path = Path(__file__).resolve().parent.parent / ".env"
        load_dotenv(env_path)
        settings = Settings.from_env()
    else:
        settings.validate()

    configure_logging(settings.log_level)

    application = FastAPI(
        title="Face Match API",
        version="1.0.0",
        description="Webcam capture, face search relay and match enrichment",
        lifespan=_build_lifespan(settings),
    )
    application.state.settings = settings
    application.state.container = None

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(health_router, prefix="/api/v1/health")
    application.include_router(faces_router, prefix="/api/v1/faces")
    application.include_router(sessions_router, prefix="/api/v1/sessions")

    return application


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(create_application(), host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
