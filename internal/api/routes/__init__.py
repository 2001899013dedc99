"""API route modules."""

from .health_routes import create_health_routes
from .sample_routes import router as sample_router

__all__ = [
    "create_health_routes",
    "sample_router",
]
