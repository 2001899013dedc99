"""
Interface Layer - Abstract interfaces for dependency injection.

This layer defines contracts that infrastructure implementations must fulfill.
Services depend on these interfaces, not concrete implementations.
"""

from .audio_downloader import IAudioDownloader
from .audio_processor import IAudioProcessor

__all__ = [
    "IAudioDownloader",
    "IAudioProcessor",
]
