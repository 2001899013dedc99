"""
yt-dlp Audio Downloader - Fetches a single audio-only stream with the yt-dlp CLI.

Implements IAudioDownloader interface for dependency injection.
The downloader runs as an asyncio subprocess so the event loop stays free
while it works.
"""

import asyncio
import shutil
import time
from pathlib import Path
from typing import List, Optional

from core.config import get_settings
from core.errors import DownloadError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from interfaces.audio_downloader import IAudioDownloader


class YtDlpAudioDownloader(IAudioDownloader):
    """
    yt-dlp based audio downloader.

    Writes exactly one file at the requested destination. stdout and stderr
    are captured together and attached to DownloadError for diagnostics.
    """

    def __init__(
        self,
        executable: Optional[str] = None,
        audio_format: Optional[str] = None,
        max_file_size: Optional[int] = None,
        timeout_seconds: Optional[float] = None,
    ):
        """
        Initialize yt-dlp downloader.

        Args:
            executable: yt-dlp executable name or path (defaults to settings)
            audio_format: yt-dlp format selector (defaults to settings)
            max_file_size: Maximum file size in bytes (defaults to settings)
            timeout_seconds: Kill the process after this many seconds (defaults to settings)
        """
        settings = get_settings()
        self.executable = executable or settings.downloader_executable
        self.audio_format = audio_format or settings.downloader_format
        self.max_file_size = max_file_size or settings.max_file_size
        self.timeout_seconds = timeout_seconds or settings.download_timeout_seconds

    def build_command(self, url: str, destination: Path) -> List[str]:
        """Build the yt-dlp argument list for one download."""
        return [
            self.executable,
            "--format",
            self.audio_format,
            "--max-filesize",
            str(self.max_file_size),
            "--no-playlist",
            "-o",
            str(destination),
            "--",
            url,
        ]

    async def download(self, url: str, destination: Path) -> int:
        """
        Download the audio stream of url to destination.

        Implements IAudioDownloader.download() interface.

        Args:
            url: Media URL
            destination: Exact output path

        Returns:
            Size of the written file in bytes

        Raises:
            DownloadError: If the process cannot start, fails, times out,
                or exits without writing destination
        """
        logger.info(LogMessages.DOWNLOAD_START.format(url=url))
        cmd = self.build_command(url, destination)
        start = time.time()

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            raise DownloadError(
                ErrorMessages.DOWNLOADER_START_FAILED.format(
                    executable=self.executable, error=e
                )
            ) from e

        try:
            stdout, _ = await asyncio.wait_for(
                process.communicate(), timeout=self.timeout_seconds
            )
        except asyncio.TimeoutError as e:
            # Partial output is discarded along with the cancelled communicate()
            raise DownloadError(
                ErrorMessages.DOWNLOADER_TIMEOUT.format(timeout=self.timeout_seconds),
                output="",
            ) from e
        finally:
            # Timed out or cancelled
            if process.returncode is None:
                await self._kill(process)

        output = (stdout or b"").decode("utf-8", errors="replace")

        if process.returncode != 0:
            raise DownloadError(
                ErrorMessages.DOWNLOADER_EXIT_CODE.format(code=process.returncode),
                output=output,
            )

        # yt-dlp exits 0 when --max-filesize skips the download
        if not destination.is_file():
            raise DownloadError(
                ErrorMessages.DOWNLOADER_NO_OUTPUT.format(path=destination),
                output=output,
            )

        logger.debug(LogMessages.DOWNLOAD_OUTPUT.format(output=output.strip()))

        size_bytes = destination.stat().st_size
        logger.info(
            LogMessages.DOWNLOAD_COMPLETE.format(
                size=size_bytes / (1024 * 1024),
                destination=destination,
                duration=time.time() - start,
            )
        )
        return size_bytes

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
        await process.wait()
        logger.warning(LogMessages.DOWNLOAD_KILLED.format(pid=process.pid))

    def get_executable_path(self) -> Optional[str]:
        """
        Resolve the yt-dlp executable on PATH.

        Implements IAudioDownloader.get_executable_path() interface.
        """
        return shutil.which(self.executable)


# Global singleton instance
_audio_downloader: Optional[YtDlpAudioDownloader] = None


def get_ytdlp_audio_downloader() -> YtDlpAudioDownloader:
    """
    Get or create global YtDlpAudioDownloader instance (singleton).

    Returns:
        YtDlpAudioDownloader instance
    """
    global _audio_downloader

    if _audio_downloader is None:
        logger.info("Creating YtDlpAudioDownloader instance...")
        _audio_downloader = YtDlpAudioDownloader()

    return _audio_downloader
