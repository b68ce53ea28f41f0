"""
Unit tests for the dependency container wiring.
"""
import httpx
import pytest

from facematch.application.services import SessionRegistry
from facematch.core.config import Settings
from facematch.di import BaseContainer, DIContainer
from facematch.domain.gateways import EnrichmentGateway, ImageCaptureSource, MatchGateway
from facematch.infrastructure.capture import WebcamCaptureSource
from facematch.infrastructure.external import FaceSearchClient, SearchClient


class TestBaseContainer:
    def test_singleton_and_factory(self):
        container = BaseContainer()
        container.register_singleton(str, "shared")
        container.register_factory(list, lambda: [])
        assert container.get(str) == "shared"
        assert container.get(list) is not container.get(list)

    def test_unregistered_raises(self):
        with pytest.raises(ValueError, match="dict"):
            BaseContainer().get(dict)


class TestDIContainer:
    def test_wires_gateways_from_settings(self, settings):
        http_client = httpx.AsyncClient()
        container = DIContainer(settings=settings, http_client=http_client)

        match_gateway = container.get(MatchGateway)
        assert isinstance(match_gateway, FaceSearchClient)
        assert match_gateway.http_client is http_client
        assert match_gateway.collection_id == "test-collection"
        assert match_gateway.max_image_bytes == 1048576

        enrichment_gateway = container.get(EnrichmentGateway)
        assert isinstance(enrichment_gateway, SearchClient)
        assert enrichment_gateway.url == "https://search.test/v1/lookup"

        assert isinstance(container.get(ImageCaptureSource), WebcamCaptureSource)
        assert container.get(Settings) is settings

    def test_registry_builds_wired_controllers(self, settings):
        container = DIContainer(settings=settings, http_client=httpx.AsyncClient())
        controller = container.get(SessionRegistry).create()
        assert controller.match_gateway is container.get(MatchGateway)
        assert controller.enrichment_gateway is container.get(EnrichmentGateway)
        assert controller.capture_source is container.get(ImageCaptureSource)

    def test_containers_do_not_share_state(self, settings):
        first = DIContainer(settings=settings, http_client=httpx.AsyncClient())
        second = DIContainer(settings=settings, http_client=httpx.AsyncClient())
        assert first.get(SessionRegistry) is not second.get(SessionRegistry)
        assert first.get(MatchGateway) is not second.get(MatchGateway)
