"""
Failure taxonomy for the capture → match → enrich pipeline.

Every remote or capture failure is one of the FaceMatchError subclasses and
is scoped to a single session attempt. Caller mistakes (selecting an unknown
candidate, addressing an unknown session) use the builtin ValueError and
LookupError families instead so they never land in a session's Error state.
"""


class FaceMatchError(Exception):
    """Base class for failures a session can recover from with a new capture."""

    code = "face_match_error"

    @property
    def kind(self) -> str:
        return type(self).__name__


class CaptureUnavailable(FaceMatchError):
    """No camera device was accessible or it produced no frame."""

    code = "capture_unavailable"


class InvalidImageError(FaceMatchError):
    """The image is empty, undecodable or rejected by the face search service."""

    code = "invalid_image"


class AuthError(FaceMatchError):
    """The face search service rejected our credentials."""

    code = "auth_error"


class RemoteServiceError(FaceMatchError):
    """A remote call failed: timeout, transport error, error status or bad body."""

    code = "remote_service_error"


class NotFoundError(FaceMatchError):
    """The enrichment search succeeded but produced no results."""

    code = "not_found"


class SelectionError(ValueError):
    """The requested match id is not among the current session's candidates."""


class SessionNotFoundError(LookupError):
    """No live session has the given id."""


class ConfigurationError(RuntimeError):
    """Required configuration is missing or invalid at startup."""
