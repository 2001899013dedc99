"""
Pydantic Schemas - Request/Response DTOs for the API.

This module consolidates all models used across the application.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.constants import (
    AUDIO_MEDIA_TYPE,
    FORM_FIELD_REVERSE,
    FORM_FIELD_SPLICE_COUNT,
    FORM_FIELD_SPLICE_DURATION,
)


# =============================================================================
# Sampling Schemas
# =============================================================================


class DownloadRequest(BaseModel):
    """
    Request body for the sampling endpoint.

    Missing fields decode to zero values so that business rules are
    reported by the validator, not the decoder. Types are strict: a string
    where a number is expected is a decode failure. Only the camelCase keys
    are read, and NaN or Infinity durations are rejected.
    """

    model_config = ConfigDict(
        strict=True,
        allow_inf_nan=False,
        json_schema_extra={
            "examples": [
                {
                    "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                    "spliceDuration": 2.5,
                    "spliceCount": 3,
                    "reverse": False,
                }
            ]
        },
    )

    url: str = Field(default="", description="Media URL to fetch audio from")
    splice_duration: float = Field(
        default=0.0,
        alias="spliceDuration",
        description="Length of each sample in seconds",
    )
    splice_count: int = Field(
        default=0,
        alias="spliceCount",
        description="Number of samples to cut",
    )
    reverse: bool = Field(default=False, description="Reverse each sample")

    def splice_parameters(self) -> "SpliceParameters":
        return SpliceParameters(
            splice_duration=self.splice_duration,
            splice_count=self.splice_count,
            reverse=self.reverse,
        )


class SpliceParameters(BaseModel):
    """Scalar processing parameters forwarded to the audio service."""

    splice_duration: float
    splice_count: int
    reverse: bool = False

    def as_form_fields(self) -> Dict[str, str]:
        """String-encode the parameters as multipart form fields."""
        return {
            FORM_FIELD_SPLICE_DURATION: f"{self.splice_duration:f}",
            FORM_FIELD_SPLICE_COUNT: str(self.splice_count),
            FORM_FIELD_REVERSE: "true" if self.reverse else "false",
        }


@dataclass
class ProcessedAudio:
    """Processed audio returned by the audio service, ready to send to the caller."""

    content: bytes
    filename: str
    media_type: str = AUDIO_MEDIA_TYPE


# =============================================================================
# Common Response Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"error": "Error downloading audio"}]}
    )


class DownloaderStatus(BaseModel):
    available: bool
    path: Optional[str] = None


class AudioServiceStatus(BaseModel):
    url: str
    reachable: bool


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str
    service: str
    version: str
    downloader: DownloaderStatus
    audio_service: AudioServiceStatus

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "yt-sampler",
                    "version": "1.0.0",
                    "downloader": {"available": True, "path": "/usr/local/bin/yt-dlp"},
                    "audio_service": {
                        "url": "http://localhost:8081",
                        "reachable": True,
                    },
                }
            ]
        }
    )
