"""
HTTP Audio Processor Client - Relays downloaded audio to the processing service.

Implements IAudioProcessor interface for dependency injection.
Uses a pooled httpx.AsyncClient with the configured timeout.
"""

from pathlib import Path
from typing import Optional

import httpx  # type: ignore

from core.config import get_settings
from core.constants import (
    AUDIO_MEDIA_TYPE,
    FORM_FIELD_FILE,
    HEALTH_CHECK_TIMEOUT,
    HTTP_KEEPALIVE_EXPIRY,
    HTTP_MAX_CONNECTIONS,
    HTTP_MAX_KEEPALIVE_CONNECTIONS,
)
from core.errors import RelayError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from interfaces.audio_processor import IAudioProcessor
from models.schemas import SpliceParameters


HTTP_LIMITS = httpx.Limits(
    max_keepalive_connections=HTTP_MAX_KEEPALIVE_CONNECTIONS,
    max_connections=HTTP_MAX_CONNECTIONS,
    keepalive_expiry=HTTP_KEEPALIVE_EXPIRY,
)


class HttpAudioProcessorClient(IAudioProcessor):
    """
    Multipart upload client for the audio processing service.

    The response body is returned as-is whatever the status code; the
    service reports its own failures in the body.
    """

    def __init__(
        self,
        process_url: Optional[str] = None,
        health_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            process_url: Processing endpoint (defaults to settings)
            health_url: Health endpoint (defaults to settings)
            timeout_seconds: Request timeout (defaults to HTTP_TIMEOUT_SECONDS)
            client: Pre-built httpx client, mainly for tests
        """
        settings = get_settings()
        self.process_url = process_url or settings.process_url
        self.health_url = health_url or settings.health_url
        self.timeout_seconds = (
            timeout_seconds or settings.http_timeout.total_seconds()
        )
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create reusable HTTP client with connection pooling."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                limits=HTTP_LIMITS,
                timeout=httpx.Timeout(self.timeout_seconds),
            )
            logger.info(LogMessages.INIT_HTTP_CLIENT.format(timeout=self.timeout_seconds))
        return self._client

    async def process(self, file_path: Path, parameters: SpliceParameters) -> bytes:
        """
        Upload file_path with splice parameters and return the raw response body.

        Implements IAudioProcessor.process() interface.

        Raises:
            RelayError: If the file cannot be read or the HTTP call fails
        """
        try:
            content = file_path.read_bytes()
        except OSError as e:
            raise RelayError(
                ErrorMessages.RELAY_READ_FAILED.format(path=file_path, error=e)
            ) from e

        form = parameters.as_form_fields()
        logger.info(
            LogMessages.RELAY_START.format(
                filename=file_path.name,
                duration=parameters.splice_duration,
                count=parameters.splice_count,
                reverse=parameters.reverse,
            )
        )

        client = await self._get_client()
        try:
            response = await client.post(
                self.process_url,
                data=form,
                files={FORM_FIELD_FILE: (file_path.name, content, AUDIO_MEDIA_TYPE)},
            )
        except httpx.HTTPError as e:
            raise RelayError(ErrorMessages.RELAY_REQUEST_FAILED.format(error=e)) from e

        if response.status_code >= 400:
            logger.warning(
                LogMessages.RELAY_ERROR_STATUS.format(status_code=response.status_code)
            )

        logger.info(
            LogMessages.RELAY_COMPLETE.format(
                status_code=response.status_code, size=len(response.content)
            )
        )
        return response.content

    async def check_health(self) -> bool:
        """
        Probe the audio service health endpoint.

        Implements IAudioProcessor.check_health() interface.
        """
        client = await self._get_client()
        try:
            response = await client.get(self.health_url, timeout=HEALTH_CHECK_TIMEOUT)
        except httpx.HTTPError as e:
            logger.warning(f"Audio service health check failed: {e}")
            return False
        return response.is_success

    async def aclose(self) -> None:
        """Close the pooled HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()


# Global singleton instance
_audio_processor: Optional[HttpAudioProcessorClient] = None


def get_audio_processor_client() -> HttpAudioProcessorClient:
    """
    Get or create global HttpAudioProcessorClient instance (singleton).

    Returns:
        HttpAudioProcessorClient instance
    """
    global _audio_processor

    if _audio_processor is None:
        logger.info("Creating HttpAudioProcessorClient instance...")
        _audio_processor = HttpAudioProcessorClient()

    return _audio_processor
