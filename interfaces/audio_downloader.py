"""
Audio Downloader Interface - Abstract interface for fetching audio from media URLs.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class IAudioDownloader(ABC):
    """
    Abstract interface for downloading the audio stream of a media URL.

    Implementations:
    - infrastructure.ytdlp.audio_downloader.YtDlpAudioDownloader
    """

    @abstractmethod
    async def download(self, url: str, destination: Path) -> int:
        """
        Download the audio stream of a media URL to destination.

        Args:
            url: Media page or file URL
            destination: Exact local path the audio file must be written to

        Returns:
            Size of the written file in bytes

        Raises:
            DownloadError: If the download fails or produces no file
        """
        pass

    @abstractmethod
    def get_executable_path(self) -> Optional[str]:
        """
        Resolve the downloader executable.

        Returns:
            Absolute path of the executable, or None if it is not installed
        """
        pass
