"""
Core Layer - Configuration, logging, errors and dependency wiring.
"""

from .config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
