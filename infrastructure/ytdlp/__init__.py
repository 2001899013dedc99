"""
yt-dlp Infrastructure - External downloader integration.
"""

from .audio_downloader import YtDlpAudioDownloader, get_ytdlp_audio_downloader

__all__ = [
    "YtDlpAudioDownloader",
    "get_ytdlp_audio_downloader",
]
