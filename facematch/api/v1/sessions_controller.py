# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Response, status

# Local application imports
from ...application.dto.session_dto import CaptureRequest, SelectRequest, SessionResponse
from ...application.services import SessionController, SessionRegistry
from ...domain.errors import FaceMatchError, SelectionError
from ...infrastructure.capture import UploadedImageSource
from .dependencies import get_session_controller, get_session_registry, to_http_exception

logger = logging.getLogger(__name__)
router = APIRouter(tags=["sessions"])


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionResponse:
    """Start a new idle session."""
    controller = registry.create()
    return SessionResponse.from_state(controller.session_id, controller.view_info())


@router.get("/{session_id}", response_model=SessionResponse)
async def view_session(
    controller: SessionController = Depends(get_session_controller),
) -> SessionResponse:
    """
    View the session: candidates, the selected match and its information.
    """
    return SessionResponse.from_state(controller.session_id, controller.view_info())


@router.post("/{session_id}/capture", response_model=SessionResponse)
async def capture(
    request: CaptureRequest,
    controller: SessionController = Depends(get_session_controller),
) -> SessionResponse:
    """
    Capture an image and search for matches.

    With ``image`` the browser's webcam frame is used; without it the
    server-attached camera is. Remote failures come back as the ``error``
    state, not as an HTTP error.
    """
    source = None
    if request.image is not None:
        try:
            source = UploadedImageSource.from_base64(request.image)
        except FaceMatchError as exception:
            raise to_http_exception(exception) from exception

    state = await controller.capture(source)
    return SessionResponse.from_state(controller.session_id, state)


@router.post("/{session_id}/select", response_model=SessionResponse)
async def select(
    request: SelectRequest,
    controller: SessionController = Depends(get_session_controller),
) -> SessionResponse:
    """Select one of the current candidates and look up its information."""
    try:
        state = await controller.select(request.match_id)
    except SelectionError as exception:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exception)
        )
    return SessionResponse.from_state(controller.session_id, state)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> Response:
    """End a session."""
    if not registry.discard(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
