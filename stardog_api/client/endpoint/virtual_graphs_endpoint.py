"""Stardog Virtual Graphs Endpoint"""

from typing import List, Optional

from .base_endpoint import BaseEndpoint
from ..request_context import RequestContext
from ...model.virtual_graphs_model import VirtualGraph, VirtualGraphNamesResponse, VirtualGraphsListResponse


class VirtualGraphsEndpoint(BaseEndpoint):
    """Client endpoint for listing virtual graphs."""

    async def list_names(self, ctx: Optional[RequestContext]) -> List[str]:
        data = await self._request_typed(ctx, "GET", "admin/virtual_graphs", VirtualGraphNamesResponse)
        return data.virtual_graphs if data else []

    async def list(self, ctx: Optional[RequestContext]) -> List[VirtualGraph]:
        data = await self._request_typed(ctx, "GET", "admin/virtual_graphs/list", VirtualGraphsListResponse)
        return data.virtual_graphs if data else []
