"""
Stardog Client Utilities

Shared utilities and helper functions for Stardog client operations.
"""

from .client_utils import (
    ErrorKind,
    StardogClientError,
    StardogConfigurationError,
    ContextRequiredError,
    RequestCancelledError,
    DeadlineExceededError,
    StardogAPIError,
    StardogDecodeError,
    validate_required_params,
    parse_bool_response,
)
from .query_options import QueryParam, QueryOptions, add_options

__all__ = [
    'ErrorKind',
    'StardogClientError',
    'StardogConfigurationError',
    'ContextRequiredError',
    'RequestCancelledError',
    'DeadlineExceededError',
    'StardogAPIError',
    'StardogDecodeError',
    'validate_required_params',
    'parse_bool_response',
    'QueryParam',
    'QueryOptions',
    'add_options',
]
