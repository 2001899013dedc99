"""
System dependencies validation and FastAPI dependency injection.

This module provides:
- System dependency validation (yt-dlp)
- FastAPI dependency injection functions for routes
"""

import shutil
from typing import Optional, Tuple

from core.config import get_settings
from core.errors import MissingDependencyError
from core.logger import logger
from core.messages import ErrorMessages


def check_downloader() -> Tuple[bool, Optional[str]]:
    """
    Check if the configured downloader executable is installed and accessible.

    Returns:
        Tuple of (is_available, path)
    """
    settings = get_settings()
    path = shutil.which(settings.downloader_executable)
    if path:
        return True, path

    logger.warning(f"{settings.downloader_executable} not found in PATH")
    return False, None


def validate_dependencies() -> None:
    """
    Validate all required system dependencies.

    Raises:
        MissingDependencyError: If the downloader executable is missing
    """
    logger.info("Validating system dependencies...")

    available, path = check_downloader()
    if not available:
        error_msg = ErrorMessages.DOWNLOADER_NOT_FOUND.format(
            executable=get_settings().downloader_executable
        )
        logger.error(error_msg)
        raise MissingDependencyError(error_msg)

    logger.info(f"All dependencies validated: downloader={path}")


# =============================================================================
# FastAPI Dependency Injection
# =============================================================================


def get_sample_service_dependency():
    """
    FastAPI dependency for SampleService.

    Usage in routes:
        @router.post("/downloadUrl")
        async def download_url(
            service: SampleService = Depends(get_sample_service_dependency)
        ):
            ...

    Returns:
        SampleService instance with injected dependencies
    """
    from core.container import get_sample_service

    return get_sample_service()


def get_audio_processor_dependency():
    """
    FastAPI dependency for IAudioProcessor.

    Returns:
        IAudioProcessor implementation
    """
    from core.container import get_audio_processor

    return get_audio_processor()


def get_audio_downloader_dependency():
    """
    FastAPI dependency for IAudioDownloader.

    Returns:
        IAudioDownloader implementation
    """
    from core.container import get_audio_downloader

    return get_audio_downloader()
