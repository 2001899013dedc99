"""
Tests for YtDlpAudioDownloader.

asyncio.create_subprocess_exec is patched with a fake process so no real
yt-dlp run happens; one test uses a missing executable to exercise the
start-failure path for real.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from core.errors import DownloadError
from infrastructure.ytdlp.audio_downloader import YtDlpAudioDownloader

SUBPROCESS_EXEC = "infrastructure.ytdlp.audio_downloader.asyncio.create_subprocess_exec"


class FakeProcess:
    """Stand-in for asyncio.subprocess.Process."""

    pid = 4242

    def __init__(self, returncode=0, output=b"", on_communicate=None, hang=False):
        self.exit_code = returncode
        self.returncode = None
        self.output = output
        self.on_communicate = on_communicate
        self.hang = hang
        self.killed = False
        self.waited = False

    async def communicate(self):
        if self.hang:
            await asyncio.sleep(10)
        if self.on_communicate:
            self.on_communicate()
        self.returncode = self.exit_code
        return self.output, None

    def kill(self):
        self.killed = True
        self.returncode = -9

    async def wait(self):
        self.waited = True
        return self.returncode


@pytest.fixture
def downloader():
    return YtDlpAudioDownloader(
        executable="yt-dlp",
        audio_format="140",
        max_file_size=50 * 1024 * 1024,
        timeout_seconds=5,
    )


class TestBuildCommand:

    def test_command_arguments(self, downloader, tmp_path):
        destination = tmp_path / "123.mp3"

        cmd = downloader.build_command("https://example.com/watch?v=abc", destination)

        assert cmd == [
            "yt-dlp",
            "--format",
            "140",
            "--max-filesize",
            str(50 * 1024 * 1024),
            "--no-playlist",
            "-o",
            str(destination),
            "--",
            "https://example.com/watch?v=abc",
        ]


class TestDownload:

    @pytest.mark.asyncio
    async def test_success_returns_file_size(self, downloader, tmp_path):
        destination = tmp_path / "123.mp3"
        process = FakeProcess(
            output=b"[download] 100% of 3.00KiB",
            on_communicate=lambda: destination.write_bytes(b"x" * 3072),
        )

        with patch(SUBPROCESS_EXEC, new=AsyncMock(return_value=process)) as mock_exec:
            size = await downloader.download("https://example.com/v", destination)

        assert size == 3072
        args, kwargs = mock_exec.call_args
        assert list(args) == downloader.build_command("https://example.com/v", destination)
        assert kwargs["stdout"] == asyncio.subprocess.PIPE
        assert kwargs["stderr"] == asyncio.subprocess.STDOUT

    @pytest.mark.asyncio
    async def test_nonzero_exit_carries_output(self, downloader, tmp_path):
        process = FakeProcess(returncode=1, output=b"ERROR: Unsupported URL")

        with patch(SUBPROCESS_EXEC, new=AsyncMock(return_value=process)):
            with pytest.raises(DownloadError) as exc_info:
                await downloader.download("https://example.com/v", tmp_path / "a.mp3")

        assert "code 1" in str(exc_info.value)
        assert exc_info.value.output == "ERROR: Unsupported URL"

    @pytest.mark.asyncio
    async def test_missing_output_file(self, downloader, tmp_path):
        """yt-dlp exits 0 but skips the file (e.g. over --max-filesize)."""
        process = FakeProcess(output=b"File is larger than max-filesize, skipping")

        with patch(SUBPROCESS_EXEC, new=AsyncMock(return_value=process)):
            with pytest.raises(DownloadError, match="no output file") as exc_info:
                await downloader.download("https://example.com/v", tmp_path / "a.mp3")

        assert "max-filesize" in exc_info.value.output

    @pytest.mark.asyncio
    async def test_timeout_kills_process(self, tmp_path):
        downloader = YtDlpAudioDownloader(executable="yt-dlp", timeout_seconds=0.01)
        process = FakeProcess(hang=True)

        with patch(SUBPROCESS_EXEC, new=AsyncMock(return_value=process)):
            with pytest.raises(DownloadError, match="timed out") as exc_info:
                await downloader.download("https://example.com/v", tmp_path / "a.mp3")

        assert process.killed
        assert process.waited
        assert exc_info.value.output == ""

    @pytest.mark.asyncio
    async def test_cancellation_kills_process(self, downloader, tmp_path):
        process = FakeProcess(hang=True)

        with patch(SUBPROCESS_EXEC, new=AsyncMock(return_value=process)):
            task = asyncio.create_task(
                downloader.download("https://example.com/v", tmp_path / "a.mp3")
            )
            await asyncio.sleep(0.01)
            task.cancel()

            with pytest.raises(asyncio.CancelledError):
                await task

        assert process.killed
        assert process.waited

    @pytest.mark.asyncio
    async def test_finished_process_not_killed(self, downloader, tmp_path):
        destination = tmp_path / "a.mp3"
        process = FakeProcess(on_communicate=lambda: destination.write_bytes(b"x"))

        with patch(SUBPROCESS_EXEC, new=AsyncMock(return_value=process)):
            await downloader.download("https://example.com/v", destination)

        assert not process.killed

    @pytest.mark.asyncio
    async def test_executable_not_found(self, tmp_path):
        downloader = YtDlpAudioDownloader(executable="yt-dlp-does-not-exist-4f1c")

        with pytest.raises(DownloadError, match="Failed to start downloader"):
            await downloader.download("https://example.com/v", tmp_path / "a.mp3")

    @pytest.mark.asyncio
    async def test_undecodable_output_is_replaced(self, downloader, tmp_path):
        process = FakeProcess(returncode=2, output=b"bad \xff byte")

        with patch(SUBPROCESS_EXEC, new=AsyncMock(return_value=process)):
            with pytest.raises(DownloadError) as exc_info:
                await downloader.download("https://example.com/v", tmp_path / "a.mp3")

        assert exc_info.value.output == "bad \ufffd byte"


class TestExecutablePath:

    def test_resolves_with_which(self, downloader):
        with patch(
            "infrastructure.ytdlp.audio_downloader.shutil.which",
            return_value="/usr/bin/yt-dlp",
        ) as mock_which:
            assert downloader.get_executable_path() == "/usr/bin/yt-dlp"

        mock_which.assert_called_once_with("yt-dlp")

    def test_missing_executable(self):
        downloader = YtDlpAudioDownloader(executable="yt-dlp-does-not-exist-4f1c")

        assert downloader.get_executable_path() is None


def test_defaults_come_from_settings():
    from core.config import get_settings

    settings = get_settings()
    downloader = YtDlpAudioDownloader()

    assert downloader.executable == settings.downloader_executable
    assert downloader.audio_format == settings.downloader_format
    assert downloader.max_file_size == settings.max_file_size
    assert downloader.timeout_seconds == settings.download_timeout_seconds
