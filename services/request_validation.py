"""
Request decoding and validation for the sampling endpoint.

Decoding turns the raw body into a DownloadRequest; validation then checks
business rules on the decoded value. The two steps are separate so the API
can answer with distinct messages.
"""

from typing import Union

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from core.errors import DecodeError, ValidationError
from core.messages import ErrorMessages
from models.schemas import DownloadRequest

_http_url = TypeAdapter(HttpUrl)


def decode_download_request(body: Union[bytes, str]) -> DownloadRequest:
    """
    Parse a JSON request body.

    Raises:
        DecodeError: If the body is not a JSON object with correctly typed fields
    """
    try:
        return DownloadRequest.model_validate_json(body)
    except PydanticValidationError as e:
        raise DecodeError(str(e)) from e


def validate_download_request(request: DownloadRequest) -> None:
    """
    Check required fields and value ranges of a decoded request.

    Raises:
        ValidationError: With a client-facing message for the first failing rule
    """
    if not request.url:
        raise ValidationError(ErrorMessages.URL_EMPTY)
    try:
        _http_url.validate_python(request.url)
    except PydanticValidationError as e:
        raise ValidationError(ErrorMessages.URL_INVALID) from e
    if request.splice_duration <= 0:
        raise ValidationError(ErrorMessages.SPLICE_DURATION_INVALID)
    if request.splice_count <= 0:
        raise ValidationError(ErrorMessages.SPLICE_COUNT_INVALID)
