"""
Stardog Client Query Options

Declarative mapping of per-call option models onto URL query parameters.

Option models are pydantic models deriving from ``QueryOptions``. A field is
sent as a query parameter only when it is annotated with a ``QueryParam``
marker::

    class DeleteRoleOptions(QueryOptions):
        force: Annotated[bool, QueryParam("force")] = False

Fields without a marker are never encoded; endpoints consume them directly
(for example an RDF format that selects the Accept header).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple
from urllib.parse import urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict

from .client_utils import StardogConfigurationError


@dataclass(frozen=True)
class QueryParam:
    """Marks a model field as the query parameter ``name``."""
    name: str
    omit_empty: bool = False


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, Enum):
        return value.value in ("", None)
    if isinstance(value, (bool, int, float, str, list, tuple)):
        return not value
    return False


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryOptions(BaseModel):
    """Base class for option models that encode to query parameters."""

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    def query_params(self) -> List[Tuple[str, str]]:
        """
        Encode the marked fields as ``(name, value)`` pairs sorted by name.

        Lists become repeated keys; ``omit_empty`` fields are skipped when
        empty (None, False, 0, "" or an empty list).
        """
        pairs: List[Tuple[str, str]] = []
        for field_name, field_info in type(self).model_fields.items():
            marker = next((m for m in field_info.metadata if isinstance(m, QueryParam)), None)
            if marker is None:
                continue
            value = getattr(self, field_name)
            if marker.omit_empty and _is_empty(value):
                continue
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                pairs.extend((marker.name, _format_value(item)) for item in value)
            else:
                pairs.append((marker.name, _format_value(value)))
        # stable sort keeps repeated keys in list order
        pairs.sort(key=lambda pair: pair[0])
        return pairs


def add_options(path: str, options: Optional[QueryOptions]) -> str:
    """
    Add the parameters in ``options`` as URL query parameters to ``path``.

    Args:
        path: Path relative to the base endpoint, possibly with a query already
        options: Option model, or None to leave the path untouched

    Returns:
        The path with the encoded options merged into its query string

    Raises:
        StardogConfigurationError: If the path cannot be parsed as a URL
    """
    if options is None:
        return path

    try:
        parts = urlsplit(path)
    except ValueError as e:
        raise StardogConfigurationError(f"Invalid request path {path!r}: {e}") from e

    encoded = urlencode(options.query_params())
    if not encoded:
        return path

    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))
