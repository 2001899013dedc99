"""
Sampling Service - Business logic for turning a media URL into audio samples.

This service orchestrates the download and relay steps using
dependency injection through interfaces:
1. Create a per-request workspace directory
2. Download the audio stream into it (IAudioDownloader)
3. Enforce the maximum file size
4. Relay the file to the processing service (IAudioProcessor)
5. Remove the workspace, whatever happened

Concurrent pipelines are bounded by a semaphore.
"""

import asyncio
import shutil
import tempfile
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from core.config import get_settings
from core.constants import AUDIO_EXTENSION, WORKSPACE_PREFIX
from core.errors import FileTooLargeError, WorkspaceError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from interfaces.audio_downloader import IAudioDownloader
from interfaces.audio_processor import IAudioProcessor
from models.schemas import DownloadRequest, ProcessedAudio


class SampleService:
    """
    Stateless pipeline: download, relay, respond.

    Uses dependency injection through interfaces:
    - IAudioDownloader: For fetching the audio stream
    - IAudioProcessor: For splicing via the audio service
    """

    def __init__(
        self,
        audio_downloader: IAudioDownloader,
        audio_processor: IAudioProcessor,
        temp_dir: Optional[str] = None,
        max_file_size: Optional[int] = None,
        max_concurrent_jobs: Optional[int] = None,
    ):
        settings = get_settings()
        self.audio_downloader = audio_downloader
        self.audio_processor = audio_processor
        self.temp_dir = Path(temp_dir or settings.temp_dir)
        self.max_file_size = max_file_size or settings.max_file_size
        self.max_concurrent_jobs = max_concurrent_jobs or settings.max_concurrent_jobs
        self._slots = asyncio.Semaphore(self.max_concurrent_jobs)

        logger.info(
            LogMessages.INIT_SERVICE.format(
                downloader=self.audio_downloader.__class__.__name__,
                processor=self.audio_processor.__class__.__name__,
                jobs=self.max_concurrent_jobs,
            )
        )

    @contextmanager
    def workspace(self) -> Iterator[Path]:
        """
        Create a uniquely named directory for one request and always remove it.

        Raises:
            WorkspaceError: If the directory cannot be created
        """
        try:
            self.temp_dir.mkdir(parents=True, exist_ok=True)
            path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=self.temp_dir))
        except OSError as e:
            raise WorkspaceError(
                ErrorMessages.WORKSPACE_CREATE_FAILED.format(path=self.temp_dir, error=e)
            ) from e

        logger.debug(LogMessages.WORKSPACE_CREATED.format(path=path))
        try:
            yield path
        finally:
            try:
                shutil.rmtree(path)
                logger.debug(LogMessages.WORKSPACE_REMOVED.format(path=path))
            except OSError as e:
                logger.warning(
                    LogMessages.WORKSPACE_CLEANUP_FAILED.format(path=path, error=e)
                )

    @staticmethod
    def generate_filename() -> str:
        """Time-derived output filename."""
        return f"{time.time_ns()}{AUDIO_EXTENSION}"

    async def create_sample(self, request: DownloadRequest) -> ProcessedAudio:
        """
        Run the full pipeline for a validated request.

        Args:
            request: Decoded and validated DownloadRequest

        Returns:
            ProcessedAudio with the audio service response body

        Raises:
            WorkspaceError: If the workspace cannot be created
            DownloadError: If the downloader fails
            FileTooLargeError: If the download exceeds max_file_size
            RelayError: If the audio service cannot be reached
        """
        start = time.time()
        logger.info(
            LogMessages.REQUEST_RECEIVED.format(
                url=request.url,
                duration=request.splice_duration,
                count=request.splice_count,
                reverse=request.reverse,
            )
        )

        async with self._slots:
            with self.workspace() as workspace:
                filename = self.generate_filename()
                output_path = workspace / filename

                size_bytes = await self.audio_downloader.download(request.url, output_path)
                if size_bytes > self.max_file_size:
                    raise FileTooLargeError(size_bytes, self.max_file_size)

                content = await self.audio_processor.process(
                    output_path, request.splice_parameters()
                )

        logger.info(
            LogMessages.REQUEST_COMPLETE.format(
                filename=filename, size=len(content), duration=time.time() - start
            )
        )
        return ProcessedAudio(content=content, filename=filename)


# Global singleton instance
_sample_service: Optional[SampleService] = None


def get_sample_service(
    audio_downloader: Optional[IAudioDownloader] = None,
    audio_processor: Optional[IAudioProcessor] = None,
) -> SampleService:
    """
    Get or create global SampleService instance (singleton).

    Args:
        audio_downloader: Optional IAudioDownloader implementation
        audio_processor: Optional IAudioProcessor implementation

    Returns:
        SampleService instance
    """
    global _sample_service

    if _sample_service is None:
        from infrastructure.http.audio_processor_client import get_audio_processor_client
        from infrastructure.ytdlp.audio_downloader import get_ytdlp_audio_downloader

        logger.info("Creating SampleService instance...")
        _sample_service = SampleService(
            audio_downloader=audio_downloader or get_ytdlp_audio_downloader(),
            audio_processor=audio_processor or get_audio_processor_client(),
        )

    return _sample_service
