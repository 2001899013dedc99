"""
Tests for the DI container and application startup wiring.
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def fresh_container():
    from core.container import Container

    Container.clear()
    yield Container
    Container.clear()


class TestContainerBootstrap:
    """Tests for DI container bootstrap."""

    def test_bootstrap_is_idempotent(self, fresh_container):
        from core.container import bootstrap_container

        bootstrap_container()
        assert fresh_container.is_initialized()

        bootstrap_container()
        assert fresh_container.is_initialized()

    def test_container_clear_resets_state(self, fresh_container):
        from core.container import bootstrap_container

        bootstrap_container()
        fresh_container.clear()

        assert not fresh_container.is_initialized()

    def test_bootstrap_registers_interfaces(self, fresh_container):
        from core.container import bootstrap_container
        from interfaces.audio_downloader import IAudioDownloader
        from interfaces.audio_processor import IAudioProcessor
        from services.sampling import SampleService

        bootstrap_container()

        assert fresh_container.is_registered(IAudioDownloader)
        assert fresh_container.is_registered(IAudioProcessor)
        assert fresh_container.is_registered(SampleService)

    def test_resolves_concrete_implementations(self, fresh_container):
        from core.container import get_audio_downloader, get_audio_processor, get_sample_service
        from infrastructure.http.audio_processor_client import HttpAudioProcessorClient
        from infrastructure.ytdlp.audio_downloader import YtDlpAudioDownloader

        downloader = get_audio_downloader()
        processor = get_audio_processor()
        service = get_sample_service()

        assert isinstance(downloader, YtDlpAudioDownloader)
        assert isinstance(processor, HttpAudioProcessorClient)
        assert service.audio_downloader is downloader
        assert service.audio_processor is processor
        assert get_sample_service() is service

    def test_resolve_unregistered_raises(self, fresh_container):
        class IUnknown:
            pass

        with pytest.raises(KeyError, match="IUnknown"):
            fresh_container.resolve(IUnknown)

    def test_register_instance_takes_precedence(self, fresh_container):
        from interfaces.audio_processor import IAudioProcessor

        sentinel = object()
        fresh_container.register_factory(IAudioProcessor, lambda: "factory")
        fresh_container.register(IAudioProcessor, sentinel)

        assert fresh_container.resolve(IAudioProcessor) is sentinel


class TestLifespan:
    """Startup must not fail when yt-dlp is missing; /health reports it."""

    def test_startup_and_shutdown(self, app, fresh_container, monkeypatch):
        import core.dependencies

        monkeypatch.setattr(
            core.dependencies.shutil, "which", lambda name: None
        )

        with TestClient(app) as client:
            assert fresh_container.is_initialized()
            assert client.get("/").status_code == 200


class TestValidateDependencies:

    def test_missing_downloader_raises(self, monkeypatch):
        import core.dependencies
        from core.errors import MissingDependencyError

        monkeypatch.setattr(core.dependencies.shutil, "which", lambda name: None)

        with pytest.raises(MissingDependencyError, match="not found"):
            core.dependencies.validate_dependencies()

    def test_present_downloader_passes(self, monkeypatch):
        import core.dependencies

        monkeypatch.setattr(
            core.dependencies.shutil, "which", lambda name: f"/usr/bin/{name}"
        )

        assert core.dependencies.check_downloader() == (True, "/usr/bin/yt-dlp")
        core.dependencies.validate_dependencies()
