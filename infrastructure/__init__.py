"""
Infrastructure Layer - External system integrations.

This layer contains implementations of interfaces defined in the interfaces/ layer.
Each subdirectory groups implementations by external dependency.

Structure:
- ytdlp/  - yt-dlp subprocess downloader
- http/   - HTTP client for the audio processing service
"""

from .http import HttpAudioProcessorClient, get_audio_processor_client
from .ytdlp import YtDlpAudioDownloader, get_ytdlp_audio_downloader

__all__ = [
    # yt-dlp download
    "YtDlpAudioDownloader",
    "get_ytdlp_audio_downloader",
    # Audio service relay
    "HttpAudioProcessorClient",
    "get_audio_processor_client",
]
