"""
Health Check API Routes.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from core import get_settings
from core.dependencies import (
    get_audio_downloader_dependency,
    get_audio_processor_dependency,
)
from interfaces.audio_downloader import IAudioDownloader
from interfaces.audio_processor import IAudioProcessor
from models.schemas import AudioServiceStatus, DownloaderStatus, HealthResponse

ROOT_MESSAGE = "yt-sampler is running"


def create_health_routes() -> APIRouter:
    """
    Factory function to create health routes.

    Returns:
        APIRouter: Configured router with / and /health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/",
        response_class=PlainTextResponse,
        summary="Root Endpoint",
        description="Static liveness acknowledgment",
        operation_id="get_root",
    )
    async def root() -> str:
        return ROOT_MESSAGE

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check downloader availability and audio service reachability",
        operation_id="health_check",
    )
    async def health_check(
        downloader: IAudioDownloader = Depends(get_audio_downloader_dependency),
        processor: IAudioProcessor = Depends(get_audio_processor_dependency),
    ) -> HealthResponse:
        """
        Health check endpoint.

        **Returns:**
        - `healthy` when yt-dlp is installed and the audio service answers
        - `degraded` otherwise
        """
        settings = get_settings()

        downloader_path = downloader.get_executable_path()
        reachable = await processor.check_health()

        status = "healthy" if downloader_path and reachable else "degraded"

        return HealthResponse(
            status=status,
            service=settings.app_name,
            version=settings.app_version,
            downloader=DownloaderStatus(
                available=downloader_path is not None, path=downloader_path
            ),
            audio_service=AudioServiceStatus(
                url=settings.audio_service_url, reachable=reachable
            ),
        )

    return router
