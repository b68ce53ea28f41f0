# Standard library imports
import os
from typing import Callable, Final, List, Optional, Mapping, TypeVar

# Local application imports
from ..domain.errors import ConfigurationError


_DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"

_Number = TypeVar("_Number", int, float)


class Settings:
    """
    Application settings loaded from environment variables.

    Credentials and endpoints for the two remote services are required;
    everything else has a sensible default. An instance is built once by the
    application factory and passed to whoever needs it.
    """

    # Environment variable -> attribute, checked by validate()
    REQUIRED = {
        "FACE_SEARCH_URL": "face_search_url",
        "FACE_SEARCH_API_KEY": "face_search_api_key",
        "FACE_SEARCH_COLLECTION_ID": "face_search_collection_id",
        "ENRICHMENT_SEARCH_URL": "enrichment_search_url",
        "ENRICHMENT_SEARCH_API_KEY": "enrichment_search_api_key",
    }

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        env = os.environ if environ is None else environ
        self._invalid: List[str] = []

        # Face search service
        self.face_search_url: Final[str] = env.get("FACE_SEARCH_URL", "")
        self.face_search_api_key: Final[str] = env.get("FACE_SEARCH_API_KEY", "")
        self.face_search_collection_id: Final[str] = env.get("FACE_SEARCH_COLLECTION_ID", "")
        self.face_search_region: Final[str] = env.get("FACE_SEARCH_REGION", "us-east-1")
        self.face_search_max_matches: Final[int] = self._number(env, "FACE_SEARCH_MAX_MATCHES", "10", int)
        self.face_search_threshold: Final[float] = self._number(env, "FACE_SEARCH_THRESHOLD", "80.0", float)

        # Enrichment search service
        self.enrichment_search_url: Final[str] = env.get("ENRICHMENT_SEARCH_URL", "")
        self.enrichment_search_api_key: Final[str] = env.get("ENRICHMENT_SEARCH_API_KEY", "")

        # Outbound HTTP
        self.max_image_bytes: Final[int] = self._number(env, "MAX_IMAGE_BYTES", str(5 * 1024 * 1024), int)
        self.http_timeout_seconds: Final[float] = self._number(env, "HTTP_TIMEOUT_SECONDS", "30", float)
        self.http2_enabled: Final[bool] = env.get("HTTP2_ENABLED", "true").lower() in ("1", "true", "yes")

        # Server-side camera
        self.camera_device_index: Final[int] = self._number(env, "CAMERA_DEVICE_INDEX", "0", int)
        self.jpeg_quality: Final[int] = self._number(env, "JPEG_QUALITY", "90", int)

        # Sessions
        self.session_ttl_seconds: Final[float] = self._number(env, "SESSION_TTL_SECONDS", "1800", float)
        self.max_sessions: Final[int] = self._number(env, "MAX_SESSIONS", "1000", int)

        # Web
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in env.get("CORS_ALLOW_ORIGINS", _DEFAULT_CORS_ORIGINS).split(",")
            if origin.strip()
        ]
        self.log_level: Final[str] = env.get("LOG_LEVEL", "INFO").upper()

    def _number(self, env: Mapping[str, str], name: str, default: str, cast: Callable[[str], _Number]) -> _Number:
        raw = env.get(name, default)
        try:
            return cast(raw)
        except ValueError:
            self._invalid.append(f"{name}={raw!r}")
            return cast(default)

    def validate(self) -> "Settings":
        """
        Check that every required setting is present.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigurationError: listing every missing environment variable
                or every numeric variable that does not parse
        """
        if self._invalid:
            raise ConfigurationError(
                f"Invalid numeric environment variables: {', '.join(self._invalid)}"
            )
        missing = [name for name, attr in self.REQUIRED.items() if not getattr(self, attr)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )
        if self.max_image_bytes <= 0:
            raise ConfigurationError("MAX_IMAGE_BYTES must be positive")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build and validate settings from the process environment."""
        return cls(environ).validate()
