"""
FastAPI Service - Main entry point for the yt-sampler API.

Run with: python cmd/api/main.py
"""

import os
import sys

# Make the project root importable when launched as a script
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from core.config import get_settings  # noqa: E402
from core.logger import logger  # noqa: E402
from internal.api.app import create_app  # noqa: E402


# Create application instance
try:
    app = create_app()
except Exception as e:
    logger.error(f"Failed to create application instance: {e}")
    logger.exception("Startup error details:")
    raise


if __name__ == "__main__":
    import uvicorn  # type: ignore

    try:
        settings = get_settings()

        logger.info("========== Starting Uvicorn Server ==========")
        logger.info(f"Host: {settings.server_host}")
        logger.info(f"Port: {settings.server_port}")

        uvicorn.run(
            app,
            host=settings.server_host,
            port=settings.server_port,
            log_level="info" if settings.debug else "warning",
        )

    except Exception as e:
        logger.error(f"Failed to start Uvicorn server: {e}")
        logger.exception("Uvicorn startup error details:")
        raise
