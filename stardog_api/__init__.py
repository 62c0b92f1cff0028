"""
Stardog API Client

Typed async client for the Stardog graph database HTTP API.
"""

from .client.client_factory import create_stardog_client
from .client.config.client_config_loader import StardogClientConfig, ClientConfigurationError
from .client.request_context import RequestContext
from .client.request_options import MultipartForm, RequestHeaderOptions
from .client.response.client_response import Response
from .client.stardog_client import StardogClient
from .client.transport.auth_transport import BasicAuthTransport, BearerAuthTransport
from .client.utils.client_utils import (
    ErrorKind,
    StardogClientError,
    StardogConfigurationError,
    ContextRequiredError,
    RequestCancelledError,
    DeadlineExceededError,
    StardogAPIError,
    StardogDecodeError,
    parse_bool_response,
)
from .client.utils.query_options import QueryOptions, QueryParam, add_options

__version__ = "0.1.0"

__all__ = [
    'create_stardog_client',
    'StardogClient',
    'StardogClientConfig',
    'ClientConfigurationError',
    'RequestContext',
    'RequestHeaderOptions',
    'MultipartForm',
    'Response',
    'BasicAuthTransport',
    'BearerAuthTransport',
    'ErrorKind',
    'StardogClientError',
    'StardogConfigurationError',
    'ContextRequiredError',
    'RequestCancelledError',
    'DeadlineExceededError',
    'StardogAPIError',
    'StardogDecodeError',
    'parse_bool_response',
    'QueryOptions',
    'QueryParam',
    'add_options',
]
