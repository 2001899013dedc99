"""
FastAPI application factory for the sampler API.

The route table is built once here and never mutated afterwards.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status as http_status  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore
from starlette.exceptions import HTTPException as StarletteHTTPException  # type: ignore

from core.config import get_settings
from core.dependencies import validate_dependencies
from core.logger import logger
from core.messages import ErrorMessages
from internal.api.routes.health_routes import create_health_routes
from internal.api.routes.sample_routes import router as sample_router
from internal.api.utils import error_response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.

    - Checks that yt-dlp is installed (warns only; /health reports it)
    - Bootstraps the DI container
    - Closes the audio service HTTP client on shutdown
    """
    settings = get_settings()
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"API: {settings.server_host}:{settings.server_port}")
    logger.info(f"Audio service: {settings.process_url}")
    logger.info(
        f"Limits: max_file_size={settings.max_file_size} bytes, "
        f"http_timeout={settings.http_timeout_seconds}s, "
        f"max_concurrent_jobs={settings.max_concurrent_jobs}"
    )

    try:
        validate_dependencies()
    except Exception as e:
        logger.warning(f"Dependency validation warning: {e}")

    from core.container import bootstrap_container, get_audio_processor

    bootstrap_container()
    logger.info("DI Container initialized")

    logger.info(f"========== {settings.app_name} API service started successfully ==========")

    yield

    logger.info("========== Shutting down API service ==========")
    try:
        await get_audio_processor().aclose()
    except Exception as e:
        logger.warning(f"Failed to close audio service client: {e}")
    logger.info("========== API service stopped successfully ==========")


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    description = """
## yt-sampler API

Turns a media URL into a set of audio samples.

### Processing Flow

1. **Request** - POST `{url, spliceDuration, spliceCount, reverse}` to `/downloadUrl`
2. **Download** - yt-dlp fetches the audio-only stream into a temporary workspace
3. **Process** - the file is uploaded to the audio processing service
4. **Response** - the processed audio is returned as an `audio/mpeg` attachment
    """

    tags_metadata = [
        {
            "name": "Sampling",
            "description": "Download audio from a URL and splice it into samples.",
        },
        {
            "name": "Health",
            "description": "Liveness and dependency health endpoints.",
        },
    ]

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=description,
        lifespan=lifespan,
        openapi_tags=tags_metadata,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.include_router(sample_router)
    app.include_router(create_health_routes())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions (404, 405, ...) with the error format."""
        logger.warning(f"HTTP {exc.status_code} on {request.method} {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions without leaking details."""
        logger.error(f"Unhandled exception: {str(exc)}")
        logger.exception("Exception details:")
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(ErrorMessages.INTERNAL_ERROR),
        )

    return app
