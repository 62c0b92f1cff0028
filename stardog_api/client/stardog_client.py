"""Stardog Client

Async HTTP client for the Stardog server API.
"""

import json
import logging
import re
from typing import Any, Dict, Optional, Union
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel

from .endpoint.data_sources_endpoint import DataSourcesEndpoint
from .endpoint.database_admin_endpoint import DatabaseAdminEndpoint
from .endpoint.roles_endpoint import RolesEndpoint
from .endpoint.server_admin_endpoint import ServerAdminEndpoint
from .endpoint.sparql_endpoint import SparqlEndpoint
from .endpoint.stored_queries_endpoint import StoredQueriesEndpoint
from .endpoint.transactions_endpoint import TransactionsEndpoint
from .endpoint.users_endpoint import UsersEndpoint
from .endpoint.virtual_graphs_endpoint import VirtualGraphsEndpoint
from .request_context import RequestContext
from .request_options import MultipartForm, RequestHeaderOptions
from .response.client_response import Response, check_response, decode_response
from .utils.client_utils import ContextRequiredError, StardogConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "http://localhost:5820/"
DEFAULT_USER_AGENT = "stardog-py"

# RFC 9110 token
_METHOD_TOKEN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


class StardogClient:
    """
    Stardog HTTP API client.

    The client resolves every request path against the base endpoint and
    dispatches through an ``httpx.AsyncClient``. Credentials are not held here:
    pass an ``http_client`` built on ``BasicAuthTransport`` or
    ``BearerAuthTransport`` (see ``create_stardog_client``).

    The client keeps no per-call state and may be shared by concurrent tasks.
    Resource services are available as attributes (``database_admin``,
    ``users``, ``roles``, ``sparql``, ...).
    """

    def __init__(self, server_url: Union[str, httpx.URL] = DEFAULT_SERVER_URL,
                 http_client: Optional[httpx.AsyncClient] = None, *,
                 user_agent: Optional[str] = DEFAULT_USER_AGENT):
        """
        Initialize the Stardog client.

        Args:
            server_url: Base endpoint of the Stardog server, e.g. http://localhost:5820
            http_client: httpx client used for dispatch (a plain AsyncClient when omitted)
            user_agent: User-Agent sent with every request; None or "" to send httpx's default

        Raises:
            StardogConfigurationError: If the server URL is not a valid absolute URL
        """
        try:
            base_url = httpx.URL(server_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise StardogConfigurationError(f"invalid server URL {server_url!r}: {e}") from e
        if not base_url.is_absolute_url:
            raise StardogConfigurationError(f"server URL must be absolute, got {server_url!r}")
        parts = urlsplit(str(base_url))
        if not parts.path.endswith("/"):
            base_url = httpx.URL(parts._replace(path=parts.path + "/").geturl())

        self.base_url: httpx.URL = base_url
        self.user_agent = user_agent
        self._http = http_client if http_client is not None else httpx.AsyncClient()

        self.server_admin = ServerAdminEndpoint(self)
        self.database_admin = DatabaseAdminEndpoint(self)
        self.users = UsersEndpoint(self)
        self.roles = RolesEndpoint(self)
        self.data_sources = DataSourcesEndpoint(self)
        self.virtual_graphs = VirtualGraphsEndpoint(self)
        self.transactions = TransactionsEndpoint(self)
        self.stored_queries = StoredQueriesEndpoint(self)
        self.sparql = SparqlEndpoint(self)

        logger.info(f"Stardog client created for {self.base_url}")

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    def _resolve(self, method: str, path: str) -> httpx.URL:
        if not urlsplit(str(self.base_url)).path.endswith("/"):
            raise StardogConfigurationError(
                f"base URL must have a trailing slash, but {self.base_url} does not")
        if not isinstance(method, str) or not _METHOD_TOKEN.match(method):
            raise StardogConfigurationError(f"invalid HTTP method {method!r}")
        try:
            return self.base_url.join(path)
        except httpx.InvalidURL as e:
            raise StardogConfigurationError(f"invalid request path {path!r}: {e}") from e

    def _base_headers(self, header_options: Optional[RequestHeaderOptions]) -> Dict[str, str]:
        headers = {}
        if header_options is not None and header_options.accept:
            headers["Accept"] = header_options.accept
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers

    @staticmethod
    def _encode_body(body: Any) -> bytes:
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True)
        try:
            return json.dumps(body, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise StardogConfigurationError(f"request body is not JSON serializable: {e}") from e

    def new_request(self, method: str, path: str,
                    header_options: Optional[RequestHeaderOptions] = None,
                    body: Any = None, *,
                    content: Optional[Union[bytes, str]] = None) -> httpx.Request:
        """
        Create an API request.

        ``path`` is resolved relative to the base URL and should not start
        with a slash. ``body`` is always JSON-encoded: a pydantic model is
        dumped by alias, any other value goes through ``json.dumps``.
        ``content`` is sent as-is and carries non-JSON payloads such as RDF
        documents or form-encoded queries.

        Raises:
            StardogConfigurationError: If the base URL lacks a trailing slash,
                the method is not a valid token, the path cannot be resolved,
                the body is not JSON serializable or both body and content are given
        """
        url = self._resolve(method, path)
        headers = self._base_headers(header_options)

        if body is not None and content is not None:
            raise StardogConfigurationError("a request takes either a JSON body or raw content, not both")
        if body is not None:
            content = self._encode_body(body)
        elif isinstance(content, str):
            content = content.encode("utf-8")
        if content is not None and header_options is not None and header_options.content_type:
            headers["Content-Type"] = header_options.content_type

        return self._http.build_request(method, url, headers=headers, content=content)

    def new_multipart_request(self, method: str, path: str,
                              header_options: Optional[RequestHeaderOptions],
                              form: Optional[MultipartForm]) -> httpx.Request:
        """
        Create a multipart/form-data API request.

        The boundary-qualified Content-Type is generated for the form.

        Raises:
            StardogConfigurationError: If the header options do not ask for
                multipart/form-data or no form is given
        """
        if (header_options is None or not header_options.content_type
                or "multipart/form-data" not in header_options.content_type
                or not isinstance(form, MultipartForm)):
            raise StardogConfigurationError("missing 'Content-Type: multipart/form-data' header")

        url = self._resolve(method, path)
        headers = self._base_headers(header_options)

        # plain fields go in as parts without a filename so the body is always multipart
        parts = [(name, (None, value)) for name, value in form.fields.items()]
        parts.extend((name, (filename, content)) for name, filename, content in form.files)

        return self._http.build_request(method, url, headers=headers, files=parts)

    async def bare_do(self, ctx: Optional[RequestContext], request: httpx.Request) -> Response:
        """
        Send an API request and return the response with its body unread.

        Raises:
            ContextRequiredError: If ``ctx`` is None
            RequestCancelledError: If the context is cancelled
            DeadlineExceededError: If the context deadline passes
            StardogAPIError: If the server answers with a non-2xx status
            httpx.TransportError: For network failures
        """
        if ctx is None:
            raise ContextRequiredError()
        ctx_err = ctx.err()
        if ctx_err is not None:
            raise ctx_err

        logger.debug(f"Dispatching {request.method} {request.url}")
        http_response = await ctx.run(self._http.send(request, stream=True))
        try:
            await ctx.run(check_response(http_response))
        except BaseException:
            # error bodies are read here, so the stream is only handed back on success
            await http_response.aclose()
            raise
        return Response(http_response)

    async def do(self, ctx: Optional[RequestContext], request: httpx.Request, dest: Any = None) -> Response:
        """
        Send an API request and decode the response body into ``dest``.

        ``dest`` may be None (body discarded), a writable byte sink such as
        ``io.BytesIO`` (body copied verbatim) or a type pydantic can validate
        JSON into; the decoded value is available as ``Response.data``.
        If the context is cancelled or its deadline passes while a byte sink
        is being filled, the bytes already written stay in the sink.

        Raises:
            StardogDecodeError: If the body does not decode into ``dest``
            plus everything ``bare_do`` raises
        """
        response = await self.bare_do(ctx, request)
        try:
            response.data = await ctx.run(decode_response(response.http_response, dest))
        finally:
            await response.http_response.aclose()
        return response

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        if self._http.is_closed:
            logger.warning("Stardog client is already closed")
            return
        await self._http.aclose()
        logger.info(f"Stardog client for {self.base_url} closed")

    async def __aenter__(self) -> "StardogClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"StardogClient(base_url={str(self.base_url)!r})"
