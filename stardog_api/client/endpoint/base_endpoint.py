"""
Stardog Client Base Endpoint

Base class for all Stardog client endpoint implementations.
"""

import io
import logging
from typing import Any, Optional, Type, TypeVar, Union
from urllib.parse import quote

from ..request_context import RequestContext
from ..request_options import RequestHeaderOptions
from ..response.client_response import Response
from ..utils.client_utils import validate_required_params
from ...model.formats_model import MediaType

T = TypeVar('T')

logger = logging.getLogger(__name__)

JSON_ACCEPT = RequestHeaderOptions(accept=MediaType.APPLICATION_JSON)
JSON_CONTENT = RequestHeaderOptions(content_type=MediaType.APPLICATION_JSON)
JSON_CONTENT_AND_ACCEPT = RequestHeaderOptions(
    content_type=MediaType.APPLICATION_JSON, accept=MediaType.APPLICATION_JSON)
TEXT_ACCEPT = RequestHeaderOptions(accept=MediaType.PLAIN_TEXT)


def path_segment(value: str) -> str:
    """Percent-encode ``value`` for use as a single path segment."""
    return quote(str(value), safe="")


class BaseEndpoint:
    """Base class for Stardog client endpoints."""

    def __init__(self, client):
        """
        Initialize the endpoint with a reference to the main client.

        Args:
            client: The main StardogClient instance
        """
        self.client = client

    async def _request(self, ctx: Optional[RequestContext], method: str, path: str, *,
                       header_options: Optional[RequestHeaderOptions] = None,
                       body: Any = None, content: Optional[Union[bytes, str]] = None,
                       dest: Any = None) -> Response:
        """
        Build a request for ``path`` and dispatch it through the client.

        ``body`` is sent JSON-encoded, ``content`` as-is.

        Returns:
            Response with the decoded body in ``data``
        """
        request = self.client.new_request(method, path, header_options, body, content=content)
        return await self.client.do(ctx, request, dest)

    async def _request_typed(self, ctx: Optional[RequestContext], method: str, path: str,
                             response_model: Type[T], *,
                             header_options: Optional[RequestHeaderOptions] = JSON_ACCEPT,
                             body: Any = None, content: Optional[Union[bytes, str]] = None) -> Optional[T]:
        """Dispatch a request and return the body decoded into ``response_model``."""
        response = await self._request(ctx, method, path, header_options=header_options,
                                       body=body, content=content, dest=response_model)
        return response.data

    async def _request_bytes(self, ctx: Optional[RequestContext], method: str, path: str, *,
                             header_options: Optional[RequestHeaderOptions] = None,
                             body: Any = None, content: Optional[Union[bytes, str]] = None) -> bytes:
        """Dispatch a request and return the raw response body."""
        buffer = io.BytesIO()
        await self._request(ctx, method, path, header_options=header_options, body=body,
                            content=content, dest=buffer)
        return buffer.getvalue()

    async def _request_text(self, ctx: Optional[RequestContext], method: str, path: str, *,
                            header_options: Optional[RequestHeaderOptions] = TEXT_ACCEPT,
                            body: Any = None, content: Optional[Union[bytes, str]] = None) -> str:
        """Dispatch a request and return the response body as text."""
        data = await self._request_bytes(ctx, method, path, header_options=header_options,
                                         body=body, content=content)
        return data.decode("utf-8")

    @staticmethod
    def _validate(**params):
        validate_required_params(**params)
