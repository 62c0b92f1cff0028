"""Stardog Stored Queries Endpoint"""

import logging
from typing import List, Optional

from .base_endpoint import BaseEndpoint, JSON_CONTENT, path_segment
from ..request_context import RequestContext
from ..response.client_response import Response
from ...model.stored_queries_model import StoredQueriesResponse, StoredQuery

logger = logging.getLogger(__name__)


class StoredQueriesEndpoint(BaseEndpoint):
    """Client endpoint for stored query operations."""

    async def list(self, ctx: Optional[RequestContext]) -> List[StoredQuery]:
        data = await self._request_typed(ctx, "GET", "admin/queries/stored", StoredQueriesResponse)
        return data.queries if data else []

    async def create_or_update(self, ctx: Optional[RequestContext], stored_query: StoredQuery) -> Response:
        """Store a query under its name, replacing any query already stored with that name."""
        self._validate(name=stored_query.name)
        logger.info(f"Storing query {stored_query.name}")
        return await self._request(ctx, "PUT", "admin/queries/stored", header_options=JSON_CONTENT,
                                   body=stored_query.model_dump(mode="json", exclude_none=True))

    async def delete(self, ctx: Optional[RequestContext], name: str) -> Response:
        self._validate(name=name)
        return await self._request(ctx, "DELETE", f"admin/queries/stored/{path_segment(name)}")
