"""
Domain exceptions for the sampling pipeline.

Each pipeline stage raises its own error type so the API layer can map
failures to HTTP status codes without inspecting messages.
"""


class SamplerError(Exception):
    """Base class for all pipeline errors."""


class MissingDependencyError(SamplerError):
    """A required system executable is not installed."""


class DecodeError(SamplerError):
    """Request body is not a well-formed download request."""


class ValidationError(SamplerError):
    """Decoded request has missing or out-of-range fields."""


class WorkspaceError(SamplerError):
    """Temporary workspace could not be created."""


class DownloadError(SamplerError):
    """External downloader failed. Carries its captured output for logging."""

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output


class FileTooLargeError(SamplerError):
    """Downloaded audio exceeds the configured maximum file size."""

    def __init__(self, size_bytes: int, max_bytes: int):
        super().__init__(
            f"File too large: {size_bytes / 1024 / 1024:.2f}MB > "
            f"{max_bytes / 1024 / 1024:.2f}MB"
        )
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes


class RelayError(SamplerError):
    """Upload to the audio processing service failed at the transport level."""


__all__ = [
    "SamplerError",
    "MissingDependencyError",
    "DecodeError",
    "ValidationError",
    "WorkspaceError",
    "DownloadError",
    "FileTooLargeError",
    "RelayError",
]
