"""
Request Body Reader
===================

Reads a JSON object body with an upper size bound.

The marker payload is taken as a raw mapping (not a Pydantic model) so that
missing or mistyped fields reach MarkerValidator and produce its messages
instead of FastAPI's generic 422 response.
"""
import json
from typing import Any, Dict

from fastapi import Request

from geomarker.core.middleware import PAYLOAD_TOO_LARGE_MESSAGE
from geomarker.domain.exceptions import MarkerError

INVALID_BODY_MESSAGE = "invalid JSON body"


class RequestBodyError(MarkerError):
    """The request body could not be accepted."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


async def read_json_object(request: Request) -> Dict[str, Any]:
    """
    FastAPI dependency returning the request body as a dict.

    Raises:
        RequestBodyError: 413 when the body exceeds the configured limit,
            400 when it is not a JSON object
    """
    max_bytes = request.app.state.settings.max_body_bytes
    chunks = []
    received = 0
    # Stop reading as soon as the limit is passed; chunked bodies carry no Content-Length
    async for chunk in request.stream():
        received += len(chunk)
        if received > max_bytes:
            raise RequestBodyError(PAYLOAD_TOO_LARGE_MESSAGE, status_code=413)
        chunks.append(chunk)
    body = b"".join(chunks)

    try:
        payload = json.loads(body or b"{}")
    except (UnicodeDecodeError, ValueError):
        raise RequestBodyError(INVALID_BODY_MESSAGE)

    if not isinstance(payload, dict):
        raise RequestBodyError(INVALID_BODY_MESSAGE)
    return payload
