"""
API utility functions for response formatting.

Errors always use the same shape:
{
    "error": str    # Short, client-safe message
}

Successful sampling requests return the audio bytes directly.
"""

from typing import Any, Dict

from fastapi.responses import JSONResponse, Response

from models.schemas import ProcessedAudio


def error_response(message: str) -> Dict[str, Any]:
    """
    Create an error response dictionary.

    Example:
        >>> error_response("Error downloading audio")
        {"error": "Error downloading audio"}
    """
    return {"error": message}


def json_error_response(message: str, status_code: int = 500) -> JSONResponse:
    """
    Create a JSONResponse with error format.

    Args:
        message: Client-facing error message
        status_code: HTTP status code

    Returns:
        JSONResponse with {"error": message}
    """
    return JSONResponse(status_code=status_code, content=error_response(message))


def audio_response(audio: ProcessedAudio) -> Response:
    """
    Create a binary attachment response for processed audio.

    Returns:
        Response with the audio bytes and a Content-Disposition attachment header
    """
    return Response(
        content=audio.content,
        media_type=audio.media_type,
        headers={"Content-Disposition": f'attachment; filename="{audio.filename}"'},
    )
