"""
Stardog Client Authentication Transports

httpx transports that attach credentials to every outbound request.
"""

import base64
import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


def _with_header(request: httpx.Request, name: str, value: str) -> httpx.Request:
    """
    Return a copy of ``request`` with ``name`` set to ``value``.

    The caller's request and its header map are left untouched; only the
    headers are copied, the body stream is shared.
    """
    headers = request.headers.copy()
    headers[name] = value
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        stream=request.stream,
        extensions=dict(request.extensions),
    )


class _DelegatingAuthTransport(httpx.AsyncBaseTransport, ABC):
    """
    Common delegation to an underlying transport.

    A transport passed in stays owned by the caller and is not closed by
    ``aclose``; only the httpx transport created here when none is given is.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.transport = transport
        self._default_transport: Optional[httpx.AsyncHTTPTransport] = None

    def _transport(self) -> httpx.AsyncBaseTransport:
        if self.transport is not None:
            return self.transport
        if self._default_transport is None:
            self._default_transport = httpx.AsyncHTTPTransport()
        return self._default_transport

    @abstractmethod
    def _authorize(self, request: httpx.Request) -> httpx.Request:
        """Return a copy of ``request`` carrying the credentials."""

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        logger.debug(f"{type(self).__name__} dispatching {request.method} {request.url}")
        return await self._transport().handle_async_request(self._authorize(request))

    def client(self, **kwargs) -> httpx.AsyncClient:
        """Return an ``httpx.AsyncClient`` whose requests go through this transport."""
        return httpx.AsyncClient(transport=self, **kwargs)

    async def aclose(self) -> None:
        if self._default_transport is not None:
            await self._default_transport.aclose()


class BasicAuthTransport(_DelegatingAuthTransport):
    """
    Authenticates all requests using HTTP Basic Authentication with the
    provided username and password.
    """

    def __init__(self, username: str, password: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(transport)
        self.username = username
        self.password = password

    def _authorize(self, request: httpx.Request) -> httpx.Request:
        credentials = f"{self.username}:{self.password}".encode("utf-8")
        token = base64.b64encode(credentials).decode("ascii")
        return _with_header(request, "Authorization", f"Basic {token}")

    def __repr__(self) -> str:
        return f"BasicAuthTransport(username={self.username!r})"


class BearerAuthTransport(_DelegatingAuthTransport):
    """Authenticates all requests using the provided bearer token."""

    def __init__(self, bearer_token: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(transport)
        self.bearer_token = bearer_token

    def _authorize(self, request: httpx.Request) -> httpx.Request:
        return _with_header(request, "Authorization", f"bearer {self.bearer_token}")

    def __repr__(self) -> str:
        return "BearerAuthTransport()"
