"""Tests for the basic and bearer authentication transports."""

import base64

import httpx
import pytest

from stardog_api.client.transport.auth_transport import (
    BasicAuthTransport, BearerAuthTransport, _DelegatingAuthTransport
)


class ClosingMockTransport(httpx.MockTransport):
    closed = False

    async def aclose(self) -> None:
        self.closed = True


def echo_authorization(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"authorization": request.headers.get("Authorization")})


@pytest.mark.asyncio
async def test_basic_auth_header():
    transport = BasicAuthTransport("admin", "s3cret", transport=httpx.MockTransport(echo_authorization))
    async with transport.client() as http_client:
        response = await http_client.get("http://localhost:5820/admin/alive")
    expected = base64.b64encode(b"admin:s3cret").decode("ascii")
    assert response.json()["authorization"] == f"Basic {expected}"


@pytest.mark.asyncio
async def test_bearer_auth_header_lowercase_scheme():
    transport = BearerAuthTransport("tok-123", transport=httpx.MockTransport(echo_authorization))
    async with transport.client() as http_client:
        response = await http_client.get("http://localhost:5820/admin/alive")
    assert response.json()["authorization"] == "bearer tok-123"


@pytest.mark.asyncio
async def test_original_request_not_mutated():
    seen = []

    def record(request):
        seen.append(request)
        return httpx.Response(200)

    transport = BasicAuthTransport("admin", "admin", transport=httpx.MockTransport(record))
    original = httpx.Request("GET", "http://localhost:5820/admin/alive", headers={"Accept": "text/plain"})
    await transport.handle_async_request(original)

    assert "Authorization" not in original.headers
    assert seen[0] is not original
    assert seen[0].headers["Accept"] == "text/plain"
    assert seen[0].headers["Authorization"].startswith("Basic ")


@pytest.mark.asyncio
async def test_body_forwarded():
    bodies = []

    def record(request):
        bodies.append(request.content)
        return httpx.Response(200)

    transport = BearerAuthTransport("tok", transport=httpx.MockTransport(record))
    async with transport.client() as http_client:
        await http_client.post("http://localhost:5820/db/update", content=b"update=CLEAR ALL")
    assert bodies == [b"update=CLEAR ALL"]


@pytest.mark.asyncio
async def test_transport_errors_propagate():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = BasicAuthTransport("admin", "admin", transport=httpx.MockTransport(refuse))
    async with transport.client() as http_client:
        with pytest.raises(httpx.ConnectError):
            await http_client.get("http://localhost:5820/admin/alive")


def test_repr_hides_secrets():
    assert "s3cret" not in repr(BasicAuthTransport("admin", "s3cret"))
    assert "tok" not in repr(BearerAuthTransport("tok"))


def test_base_transport_is_abstract():
    with pytest.raises(TypeError):
        _DelegatingAuthTransport()


@pytest.mark.asyncio
async def test_caller_transport_left_open():
    inner = ClosingMockTransport(echo_authorization)
    transport = BasicAuthTransport("admin", "admin", transport=inner)
    async with transport.client() as http_client:
        await http_client.get("http://localhost:5820/admin/alive")
    assert not inner.closed


@pytest.mark.asyncio
async def test_default_transport_closed():
    transport = BearerAuthTransport("tok")
    default = ClosingMockTransport(echo_authorization)
    transport._default_transport = default
    await transport.aclose()
    assert default.closed
