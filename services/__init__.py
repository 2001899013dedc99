"""
Service Layer - Request decoding/validation and the sampling pipeline.
"""

from .request_validation import decode_download_request, validate_download_request
from .sampling import SampleService, get_sample_service

__all__ = [
    "decode_download_request",
    "validate_download_request",
    "SampleService",
    "get_sample_service",
]
