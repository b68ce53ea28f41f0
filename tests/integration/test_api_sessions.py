"""
Integration tests for the session and relay API endpoints.
Uses TestClient with a container of mocked gateways (no real remote services).
"""
import base64
from unittest.mock import AsyncMock, MagicMock

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from facematch.api.v1.dependencies import get_container
from facematch.application.services import SessionController, SessionRegistry
from facematch.di import BaseContainer
from facematch.domain.errors import AuthError, CaptureUnavailable, InvalidImageError, NotFoundError
from facematch.domain.gateways import EnrichmentGateway, ImageCaptureSource, MatchGateway
from facematch.domain.models import EnrichmentResult, MatchCandidate
from facematch.main import create_application


M1 = MatchCandidate(match_id="m1", similarity_score=97.2, thumbnail=b"t1")
M2 = MatchCandidate(match_id="m2", similarity_score=81.0)


@pytest.fixture
def match_gateway():
    return AsyncMock(spec=MatchGateway)


@pytest.fixture
def enrichment_gateway():
    return AsyncMock(spec=EnrichmentGateway)


@pytest.fixture
def server_camera():
    camera = MagicMock(spec=ImageCaptureSource)
    camera.capture.side_effect = CaptureUnavailable("Camera device 0 is not accessible")
    return camera


@pytest.fixture
def mock_container(match_gateway, enrichment_gateway, server_camera):
    container = BaseContainer()
    container.register_singleton(MatchGateway, match_gateway)
    container.register_singleton(EnrichmentGateway, enrichment_gateway)
    container.register_singleton(ImageCaptureSource, server_camera)
    container.register_singleton(
        SessionRegistry,
        SessionRegistry(
            lambda session_id: SessionController(
                match_gateway=match_gateway,
                enrichment_gateway=enrichment_gateway,
                capture_source=server_camera,
                session_id=session_id,
            )
        ),
    )
    return container


@pytest.fixture
def client(settings, mock_container):
    """Create test client with mocked container."""
    app = create_application(settings)
    app.dependency_overrides[get_container] = lambda: mock_container
    with TestClient(app) as c:
        yield c


@pytest.fixture
def image_b64(jpeg_bytes):
    return base64.b64encode(jpeg_bytes).decode()


class TestHealthAPI:
    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestSessionAPI:
    """Tests for /api/v1/sessions endpoints"""

    def test_create_session(self, client):
        response = client.post("/api/v1/sessions")
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "idle"
        assert data["candidates"] == []
        assert data["sessionId"]

    def test_full_flow(self, client, match_gateway, enrichment_gateway, image_b64):
        match_gateway.find_matches.return_value = [M1, M2]
        enrichment_gateway.lookup.return_value = EnrichmentResult("m1", {"bio": "Painter"})
        session_id = client.post("/api/v1/sessions").json()["sessionId"]

        response = client.post(f"/api/v1/sessions/{session_id}/capture", json={"image": image_b64})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "matched"
        assert [c["matchId"] for c in data["candidates"]] == ["m1", "m2"]
        assert data["candidates"][0]["similarityScore"] == 97.2
        assert base64.b64decode(data["candidates"][0]["thumbnail"]) == b"t1"
        assert match_gateway.find_matches.await_args.args[0].format == "jpeg"

        response = client.post(f"/api/v1/sessions/{session_id}/select", json={"matchId": "m1"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "enriched"
        assert data["selected"]["matchId"] == "m1"
        assert data["enrichment"] == {"bio": "Painter"}

        view = client.get(f"/api/v1/sessions/{session_id}").json()
        assert view == data

    def test_capture_without_image_uses_server_camera(self, client, server_camera, match_gateway):
        session_id = client.post("/api/v1/sessions").json()["sessionId"]
        response = client.post(f"/api/v1/sessions/{session_id}/capture", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "error"
        assert data["error"]["kind"] == "CaptureUnavailable"
        server_camera.capture.assert_called_once()
        match_gateway.find_matches.assert_not_awaited()

    def test_remote_failure_is_error_state(self, client, match_gateway, image_b64):
        match_gateway.find_matches.side_effect = AuthError("credentials rejected")
        session_id = client.post("/api/v1/sessions").json()["sessionId"]
        data = client.post(f"/api/v1/sessions/{session_id}/capture", json={"image": image_b64}).json()
        assert data["status"] == "error"
        assert data["error"] == {"kind": "AuthError", "message": "credentials rejected"}
        assert data["candidates"] == []

    def test_bad_upload_is_400(self, client):
        session_id = client.post("/api/v1/sessions").json()["sessionId"]
        response = client.post(f"/api/v1/sessions/{session_id}/capture", json={"image": "%%%"})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_image"

    def test_oversized_upload_is_error_state(self, client, match_gateway, image_b64, tight_pixel_limit):
        session_id = client.post("/api/v1/sessions").json()["sessionId"]
        response = client.post(f"/api/v1/sessions/{session_id}/capture", json={"image": image_b64})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "error"
        assert data["error"]["kind"] == "InvalidImageError"
        match_gateway.find_matches.assert_not_awaited()

    def test_unexpected_failure_is_error_state_and_recapture_recovers(self, client, match_gateway, image_b64):
        match_gateway.find_matches.side_effect = [RuntimeError("gateway bug"), [M2]]
        session_id = client.post("/api/v1/sessions").json()["sessionId"]
        url = f"/api/v1/sessions/{session_id}/capture"

        response = client.post(url, json={"image": image_b64})
        assert response.status_code == 200
        assert response.json()["status"] == "error"
        assert response.json()["error"]["kind"] == "RemoteServiceError"

        data = client.post(url, json={"image": image_b64}).json()
        assert data["status"] == "matched"
        assert [c["matchId"] for c in data["candidates"]] == ["m2"]

    def test_select_unknown_candidate_is_409(self, client, match_gateway, image_b64):
        match_gateway.find_matches.return_value = [M1]
        session_id = client.post("/api/v1/sessions").json()["sessionId"]
        client.post(f"/api/v1/sessions/{session_id}/capture", json={"image": image_b64})
        response = client.post(f"/api/v1/sessions/{session_id}/select", json={"matchId": "nope"})
        assert response.status_code == 409

    def test_unknown_session_is_404(self, client):
        assert client.get("/api/v1/sessions/missing").status_code == 404
        assert client.post("/api/v1/sessions/missing/select", json={"matchId": "m1"}).status_code == 404

    def test_delete_session(self, client):
        session_id = client.post("/api/v1/sessions").json()["sessionId"]
        assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 204
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
        assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 404


class TestFacesAPI:
    """Tests for the stateless /api/v1/faces relay endpoints"""

    def test_search(self, client, match_gateway, image_b64):
        match_gateway.find_matches.return_value = [M1, M2]
        response = client.post("/api/v1/faces/search", json={"image": image_b64})
        assert response.status_code == 200
        matches = response.json()["matches"]
        assert [m["matchId"] for m in matches] == ["m1", "m2"]
        assert matches[1]["thumbnail"] == ""

    def test_search_accepts_data_url(self, client, match_gateway, png_bytes):
        match_gateway.find_matches.return_value = []
        data_url = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
        response = client.post("/api/v1/faces/search", json={"image": data_url})
        assert response.status_code == 200
        assert response.json() == {"matches": []}
        assert match_gateway.find_matches.await_args.args[0].format == "png"

    @pytest.mark.parametrize(
        "error, status_code, code",
        [
            (InvalidImageError("too big"), 400, "invalid_image"),
            (AuthError("denied"), 502, "auth_error"),
        ],
    )
    def test_search_errors(self, client, match_gateway, image_b64, error, status_code, code):
        match_gateway.find_matches.side_effect = error
        response = client.post("/api/v1/faces/search", json={"image": image_b64})
        assert response.status_code == status_code
        assert response.json()["detail"]["code"] == code

    def test_lookup(self, client, enrichment_gateway):
        enrichment_gateway.lookup.return_value = EnrichmentResult("m1", {"bio": "Painter"})
        response = client.get("/api/v1/faces/lookup", params={"matchId": "m1"})
        assert response.status_code == 200
        assert response.json() == {"bio": "Painter"}
        enrichment_gateway.lookup.assert_awaited_once_with("m1")

    def test_lookup_not_found(self, client, enrichment_gateway):
        enrichment_gateway.lookup.side_effect = NotFoundError("No results for match m1")
        response = client.get("/api/v1/faces/lookup", params={"matchId": "m1"})
        assert response.status_code == 404
        assert response.json()["detail"] == {"code": "not_found", "message": "No results for match m1"}

    def test_lookup_requires_match_id(self, client):
        assert client.get("/api/v1/faces/lookup").status_code == 422

    def test_search_oversized_dimensions_is_400(self, client, match_gateway, image_b64, tight_pixel_limit):
        response = client.post("/api/v1/faces/search", json={"image": image_b64})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_image"
        match_gateway.find_matches.assert_not_awaited()

    def test_search_unexpected_failure_is_502(self, client, match_gateway, image_b64):
        match_gateway.find_matches.side_effect = RuntimeError("gateway bug")
        response = client.post("/api/v1/faces/search", json={"image": image_b64})
        assert response.status_code == 502
        assert response.json()["detail"]["code"] == "remote_service_error"

    def test_lookup_unexpected_failure_is_502(self, client, enrichment_gateway):
        enrichment_gateway.lookup.side_effect = TypeError("bad record")
        response = client.get("/api/v1/faces/lookup", params={"matchId": "m1"})
        assert response.status_code == 502
        assert response.json()["detail"]["code"] == "remote_service_error"
