"""
HTTP Infrastructure - HTTP client implementations.

This module provides:
- HttpAudioProcessorClient: Async multipart relay to the audio service (implements IAudioProcessor)
"""

from .audio_processor_client import HttpAudioProcessorClient, get_audio_processor_client

__all__ = [
    "HttpAudioProcessorClient",
    "get_audio_processor_client",
]
