"""
Stardog Client Response Envelope

Wraps the httpx response of a dispatched request, classifies non-2xx
responses as StardogAPIError and decodes successful bodies.
"""

import json
import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..utils.client_utils import StardogAPIError, StardogDecodeError

logger = logging.getLogger(__name__)


class ServerErrorBody(BaseModel):
    """JSON error body returned by the Stardog server."""
    message: Optional[str] = None
    code: Optional[str] = None


class Response:
    """
    A Stardog API response.

    Exposes the raw httpx response for status and header inspection alongside
    the decoded payload (``data``), which is None when nothing was decoded.
    """

    def __init__(self, http_response: httpx.Response, data: Any = None):
        self.http_response = http_response
        self.data = data

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def request(self) -> httpx.Request:
        return self.http_response.request

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code}, data={self.data!r})"


async def check_response(response: httpx.Response) -> None:
    """
    Check the API response for errors.

    A response is an error if its status code is outside the 200 range. The
    whole body is read; a JSON body shaped like ``{"message", "code"}``
    populates the error, anything else is kept verbatim as the message.

    Raises:
        StardogAPIError: For any non-2xx response
    """
    if 200 <= response.status_code <= 299:
        return

    data = await response.aread()
    message = response.reason_phrase
    code = None
    if data:
        try:
            body = ServerErrorBody.model_validate(json.loads(data))
            message = body.message or ""
            code = body.code
        except (ValueError, ValidationError):
            message = data.decode("utf-8", errors="replace")

    logger.debug(f"Stardog API error {response.status_code}: {message} [{code}]")
    raise StardogAPIError(response.status_code, message, code, response)


async def decode_response(response: httpx.Response, dest: Any) -> Any:
    """
    Decode a successful response body into ``dest``.

    Args:
        response: Open (streamed) httpx response
        dest: None to discard the body, an object with ``write`` to receive
            the raw bytes, or a type understood by pydantic's TypeAdapter

    Returns:
        The decoded value; None for a byte sink, no destination or an empty body

    Raises:
        StardogDecodeError: If the body is not valid JSON for ``dest``
    """
    if dest is None:
        await response.aread()
        return None

    if not isinstance(dest, type) and hasattr(dest, "write"):
        async for chunk in response.aiter_bytes():
            dest.write(chunk)
        return None

    data = await response.aread()
    if not data.strip():
        # several endpoints answer 200/204 without a body
        return None

    try:
        return TypeAdapter(dest).validate_json(data)
    except ValidationError as e:
        raise StardogDecodeError(f"Failed to decode response into {dest!r}: {e}", response) from e
