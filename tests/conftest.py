"""
Shared fixtures: in-memory downloader and audio processor, a SampleService
wired to them, and a TestClient with the FastAPI dependencies overridden.
"""

import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.errors import DownloadError, RelayError  # noqa: E402
from interfaces.audio_downloader import IAudioDownloader  # noqa: E402
from interfaces.audio_processor import IAudioProcessor  # noqa: E402
from models.schemas import SpliceParameters  # noqa: E402


class MockAudioDownloader(IAudioDownloader):
    """Writes fixed content to the destination instead of running yt-dlp."""

    def __init__(self, content: bytes = b"fake-m4a-audio", should_fail: bool = False):
        self.content = content
        self.should_fail = should_fail
        self.executable_path: Optional[str] = "/usr/local/bin/yt-dlp"
        self.calls: List[Tuple[str, Path]] = []

    async def download(self, url: str, destination: Path) -> int:
        self.calls.append((url, destination))
        if self.should_fail:
            raise DownloadError(
                "Downloader exited with code 1", output="ERROR: Unsupported URL"
            )
        destination.write_bytes(self.content)
        return len(self.content)

    def get_executable_path(self) -> Optional[str]:
        return self.executable_path


class MockAudioProcessor(IAudioProcessor):
    """Returns canned bytes and records what it was sent."""

    def __init__(self, response: bytes = b"\x01\x02\x03", should_fail: bool = False):
        self.response = response
        self.should_fail = should_fail
        self.healthy = True
        self.calls: List[Tuple[Path, SpliceParameters]] = []
        self.received: List[bytes] = []

    async def process(self, file_path: Path, parameters: SpliceParameters) -> bytes:
        self.calls.append((file_path, parameters))
        self.received.append(file_path.read_bytes())
        if self.should_fail:
            raise RelayError("Request to audio service failed: connection refused")
        return self.response

    async def check_health(self) -> bool:
        return self.healthy


@pytest.fixture
def mock_downloader():
    return MockAudioDownloader()


@pytest.fixture
def mock_processor():
    return MockAudioProcessor()


@pytest.fixture
def workspace_root(tmp_path):
    """Parent directory for per-request workspaces."""
    return tmp_path / "workspaces"


@pytest.fixture
def sample_service(mock_downloader, mock_processor, workspace_root):
    from services.sampling import SampleService

    return SampleService(
        audio_downloader=mock_downloader,
        audio_processor=mock_processor,
        temp_dir=str(workspace_root),
        max_file_size=1024 * 1024,
        max_concurrent_jobs=2,
    )


@pytest.fixture
def app(sample_service, mock_downloader, mock_processor):
    """Application with all service dependencies replaced by mocks."""
    from core.dependencies import (
        get_audio_downloader_dependency,
        get_audio_processor_dependency,
        get_sample_service_dependency,
    )
    from internal.api.app import create_app

    app = create_app()
    app.dependency_overrides[get_sample_service_dependency] = lambda: sample_service
    app.dependency_overrides[get_audio_downloader_dependency] = lambda: mock_downloader
    app.dependency_overrides[get_audio_processor_dependency] = lambda: mock_processor
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
