# External package imports
from fastapi import Depends, HTTPException, Request, status

# Local application imports
from ...application.services import SessionController, SessionRegistry
from ...di.container import DIContainer
from ...domain.errors import (
    AuthError,
    CaptureUnavailable,
    FaceMatchError,
    InvalidImageError,
    NotFoundError,
    RemoteServiceError,
    SessionNotFoundError,
)


# Upstream credential failures are our misconfiguration, not the caller's
_ERROR_STATUS = {
    InvalidImageError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AuthError: status.HTTP_502_BAD_GATEWAY,
    RemoteServiceError: status.HTTP_502_BAD_GATEWAY,
    CaptureUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def get_container(request: Request) -> DIContainer:
    """
    FastAPI dependency returning the container built for this application.

    Raises:
        HTTPException: 503 while the application has not finished starting
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service is starting up",
        )
    return container


def get_session_registry(container: DIContainer = Depends(get_container)) -> SessionRegistry:
    return container.get(SessionRegistry)


def get_session_controller(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionController:
    """
    FastAPI dependency resolving the ``session_id`` path parameter.

    Raises:
        HTTPException: 404 for unknown or expired sessions
    """
    try:
        return registry.get(session_id)
    except SessionNotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )


def to_http_exception(error: FaceMatchError) -> HTTPException:
    """Translate a pipeline failure into an HTTPException with a machine-readable code."""
    status_code = _ERROR_STATUS.get(type(error), status.HTTP_502_BAD_GATEWAY)
    return HTTPException(
        status_code=status_code,
        detail={"code": error.code, "message": str(error)},
    )
