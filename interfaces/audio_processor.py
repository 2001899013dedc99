"""
Audio Processor Interface - Abstract interface for the downstream audio service.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from models.schemas import SpliceParameters


class IAudioProcessor(ABC):
    """
    Abstract interface for sending audio to the processing service.

    Implementations:
    - infrastructure.http.audio_processor_client.HttpAudioProcessorClient
    """

    @abstractmethod
    async def process(self, file_path: Path, parameters: SpliceParameters) -> bytes:
        """
        Upload an audio file with splice parameters and return the response body.

        The body is returned regardless of the HTTP status code.

        Raises:
            RelayError: If the file cannot be read or the request fails
        """
        pass

    @abstractmethod
    async def check_health(self) -> bool:
        """Return True if the processing service answers its health endpoint."""
        pass

    async def aclose(self) -> None:
        """Release network resources. No-op by default."""
        return None
