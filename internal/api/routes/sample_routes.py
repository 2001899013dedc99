"""
Sample Routes - API endpoint for downloading and splicing audio from a URL.

Success returns the processed audio as an attachment.
Errors return {"error": "..."} with 400, 413 or 500.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from core.dependencies import get_sample_service_dependency
from core.errors import (
    DecodeError,
    DownloadError,
    FileTooLargeError,
    RelayError,
    ValidationError,
    WorkspaceError,
)
from core.logger import format_exception_short, logger
from core.messages import ErrorMessages, LogMessages
from internal.api.utils import audio_response, json_error_response
from models.schemas import DownloadRequest, ErrorResponse
from services.request_validation import (
    decode_download_request,
    validate_download_request,
)
from services.sampling import SampleService

router = APIRouter()


@router.post(
    "/downloadUrl",
    tags=["Sampling"],
    summary="Download audio from a URL and splice it into samples",
    description="""
Fetches the audio stream of `url` with yt-dlp, sends it to the audio
processing service with the splice parameters and returns the result.

**Request Body:**
```json
{"url": "https://...", "spliceDuration": 2.5, "spliceCount": 3, "reverse": false}
```

**Response:** `audio/mpeg` attachment on success, `{"error": "..."}` otherwise.
""",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": DownloadRequest.model_json_schema()}
            },
        }
    },
    responses={
        200: {
            "description": "Processed audio",
            "content": {"audio/mpeg": {"schema": {"type": "string", "format": "binary"}}},
        },
        400: {"description": "Bad request", "model": ErrorResponse},
        405: {"description": "Method not allowed", "model": ErrorResponse},
        413: {"description": "Downloaded file too large", "model": ErrorResponse},
        500: {"description": "Download or processing failed", "model": ErrorResponse},
    },
)
async def download_url(
    request: Request,
    service: SampleService = Depends(get_sample_service_dependency),
) -> Response:
    """Decode, validate, then run the sampling pipeline."""
    body = await request.body()

    try:
        payload = decode_download_request(body)
    except DecodeError as e:
        logger.error(LogMessages.DECODE_FAILED.format(error=e))
        return json_error_response(ErrorMessages.INVALID_REQUEST_BODY, status_code=400)

    try:
        validate_download_request(payload)
    except ValidationError as e:
        logger.warning(LogMessages.VALIDATION_FAILED.format(error=e))
        return json_error_response(str(e), status_code=400)

    try:
        audio = await service.create_sample(payload)

    except WorkspaceError as e:
        logger.error(format_exception_short(e, "Workspace"))
        return json_error_response(ErrorMessages.TEMP_DIR_FAILED, status_code=500)

    except DownloadError as e:
        logger.error(LogMessages.DOWNLOAD_FAILED.format(error=e, output=e.output))
        return json_error_response(ErrorMessages.DOWNLOAD_FAILED, status_code=500)

    except FileTooLargeError as e:
        logger.error(f"Download rejected: {e}")
        return json_error_response(ErrorMessages.FILE_TOO_LARGE, status_code=413)

    except RelayError as e:
        logger.error(LogMessages.RELAY_FAILED.format(error=e))
        return json_error_response(ErrorMessages.PROCESSING_FAILED, status_code=500)

    return audio_response(audio)
