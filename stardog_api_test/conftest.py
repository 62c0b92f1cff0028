"""Shared fixtures for the Stardog client tests.

The server is replaced by ``httpx.MockTransport``; every request the client
sends is recorded so tests can assert on method, URL, headers and body.
"""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from stardog_api.client.request_context import RequestContext
from stardog_api.client.stardog_client import StardogClient

SERVER_URL = "http://localhost:5820"


class RecordingServer:
    """Fake Stardog server returning one canned response and recording requests."""

    def __init__(self, status_code: int = 200, json_body: Any = None, content: Optional[bytes] = None,
                 headers: Optional[dict] = None):
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.headers = headers or {}
        self.requests: List[httpx.Request] = []

    def respond(self, status_code: int = 200, json_body: Any = None, content: Optional[bytes] = None,
                headers: Optional[dict] = None) -> "RecordingServer":
        self.status_code = status_code
        self.json_body = json_body
        self.content = content
        self.headers = headers or {}
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body, headers=self.headers)
        return httpx.Response(self.status_code, content=self.content or b"", headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def make_client(handler: Callable, **kwargs) -> StardogClient:
    """Build a StardogClient whose requests are answered by ``handler``."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return StardogClient(SERVER_URL, http_client, **kwargs)


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest.fixture
def client(server) -> StardogClient:
    return make_client(server)


@pytest.fixture
def ctx() -> RequestContext:
    return RequestContext.background()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove STARDOG_* overrides that would leak into configuration tests."""
    for name in ("STARDOG_SERVER_URL", "STARDOG_USERNAME", "STARDOG_PASSWORD",
                 "STARDOG_TOKEN", "STARDOG_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
