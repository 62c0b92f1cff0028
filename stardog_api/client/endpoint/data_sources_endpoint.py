"""
Stardog Data Sources Endpoint

Client endpoint for data sources: the external systems virtual graphs read from.
"""

import logging
from typing import Any, Dict, List, Optional

from .base_endpoint import BaseEndpoint, JSON_CONTENT, TEXT_ACCEPT, path_segment
from ..request_context import RequestContext
from ..response.client_response import Response
from ..utils.client_utils import StardogDecodeError
from ..utils.query_options import add_options
from ...model.data_sources_model import (
    AddDataSourceRequest, DataSource, DataSourceNamesResponse, DataSourceOptionsResponse,
    DataSourcesListResponse, DeleteDataSourceOptions, RefreshDataSourceOptions, UpdateDataSourceRequest
)

logger = logging.getLogger(__name__)

_TRUE_TEXT = ("1", "t", "true")
_FALSE_TEXT = ("0", "f", "false")


def _refresh_body(options: Optional[RefreshDataSourceOptions]) -> Dict[str, Any]:
    # the server expects at least an empty object when no table is named
    if options is None:
        return {}
    return options.model_dump(by_alias=True, exclude_none=True)


class DataSourcesEndpoint(BaseEndpoint):
    """Client endpoint for data source operations."""

    def _data_source_path(self, data_source: str, suffix: str = "") -> str:
        self._validate(data_source=data_source)
        return f"admin/data_sources/{path_segment(data_source)}{suffix}"

    async def list_names(self, ctx: Optional[RequestContext]) -> List[str]:
        data = await self._request_typed(ctx, "GET", "admin/data_sources", DataSourceNamesResponse)
        return data.data_sources if data else []

    async def list(self, ctx: Optional[RequestContext]) -> List[DataSource]:
        data = await self._request_typed(ctx, "GET", "admin/data_sources/list", DataSourcesListResponse)
        return data.data_sources if data else []

    async def is_available(self, ctx: Optional[RequestContext], data_source: str) -> bool:
        """Whether the server can currently connect to the data source."""
        text = await self._request_text(ctx, "GET", self._data_source_path(data_source, "/available"),
                                        header_options=TEXT_ACCEPT)
        value = text.strip().lower()
        if value in _TRUE_TEXT:
            return True
        if value in _FALSE_TEXT:
            return False
        raise StardogDecodeError(f"data source availability is not a boolean: {text!r}")

    async def options(self, ctx: Optional[RequestContext], data_source: str) -> Dict[str, Any]:
        data = await self._request_typed(ctx, "GET", self._data_source_path(data_source, "/options"),
                                         DataSourceOptionsResponse)
        return data.options if data else {}

    async def add(self, ctx: Optional[RequestContext], name: str, options: Dict[str, Any]) -> Response:
        """
        Register a new data source.

        Args:
            ctx: Request context
            name: Data source name
            options: Connection options, e.g. ``{"jdbc.url": ..., "jdbc.username": ...}``
        """
        self._validate(name=name)
        logger.info(f"Adding data source {name}")
        return await self._request(ctx, "POST", "admin/data_sources", header_options=JSON_CONTENT,
                                   body=AddDataSourceRequest(name=name, options=options))

    async def update(self, ctx: Optional[RequestContext], data_source: str, options: Dict[str, Any]) -> Response:
        return await self._request(ctx, "PUT", self._data_source_path(data_source),
                                   header_options=JSON_CONTENT, body=UpdateDataSourceRequest(options=options))

    async def refresh_metadata(self, ctx: Optional[RequestContext], data_source: str,
                               options: Optional[RefreshDataSourceOptions] = None) -> Response:
        """Clear the cached metadata of one table, or of every table when no table is given."""
        return await self._request(ctx, "POST", self._data_source_path(data_source, "/refresh_metadata"),
                                   header_options=JSON_CONTENT, body=_refresh_body(options))

    async def refresh_counts(self, ctx: Optional[RequestContext], data_source: str,
                             options: Optional[RefreshDataSourceOptions] = None) -> Response:
        """Refresh the row-count estimates of one table, or of every table when no table is given."""
        return await self._request(ctx, "POST", self._data_source_path(data_source, "/refresh_counts"),
                                   header_options=JSON_CONTENT, body=_refresh_body(options))

    async def share(self, ctx: Optional[RequestContext], data_source: str) -> Response:
        """Make a private data source shareable between virtual graphs."""
        return await self._request(ctx, "POST", self._data_source_path(data_source, "/share"))

    async def test_existing(self, ctx: Optional[RequestContext], data_source: str) -> Response:
        """Test the connection of a registered data source."""
        return await self._request(ctx, "POST", self._data_source_path(data_source, "/test_data_source"))

    async def online(self, ctx: Optional[RequestContext], data_source: str) -> Response:
        return await self._request(ctx, "POST", self._data_source_path(data_source, "/online"))

    async def delete(self, ctx: Optional[RequestContext], data_source: str,
                     options: Optional[DeleteDataSourceOptions] = None) -> Response:
        path = add_options(self._data_source_path(data_source), options)
        logger.info(f"Deleting data source {data_source}")
        return await self._request(ctx, "DELETE", path)
