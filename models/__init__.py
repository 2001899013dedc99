"""
Models Layer - Data models and Pydantic schemas.

This layer contains:
- Pydantic schemas for API request/response DTOs
- ProcessedAudio, the in-memory result of one sampling request
"""

from .schemas import (
    AudioServiceStatus,
    DownloaderStatus,
    DownloadRequest,
    ErrorResponse,
    HealthResponse,
    ProcessedAudio,
    SpliceParameters,
)

__all__ = [
    # Sampling
    "DownloadRequest",
    "SpliceParameters",
    "ProcessedAudio",
    # API Response schemas
    "ErrorResponse",
    "HealthResponse",
    "DownloaderStatus",
    "AudioServiceStatus",
]
