"""
Stardog Server Admin Endpoint

Client endpoint for server health and process management.
"""

import logging
from typing import List, Optional

from .base_endpoint import BaseEndpoint, path_segment
from ..request_context import RequestContext
from ..response.client_response import Response
from ..utils.client_utils import StardogAPIError, parse_bool_response
from ...model.server_model import Process

logger = logging.getLogger(__name__)


class ServerAdminEndpoint(BaseEndpoint):
    """Client endpoint for server administration."""

    async def is_alive(self, ctx: Optional[RequestContext]) -> bool:
        """
        Check whether the server is accepting traffic.

        Returns:
            True if the server answered 200, False if it answered 404

        Raises:
            StardogAPIError: For any other non-2xx status
        """
        error = None
        try:
            await self._request(ctx, "GET", "admin/alive")
        except StardogAPIError as e:
            error = e
        return parse_bool_response(error)

    async def list_processes(self, ctx: Optional[RequestContext]) -> List[Process]:
        """List the processes (queries, transactions, ...) running on the server."""
        processes = await self._request_typed(ctx, "GET", "admin/processes", List[Process])
        return processes or []

    async def get_process(self, ctx: Optional[RequestContext], process_id: str) -> Optional[Process]:
        self._validate(process_id=process_id)
        return await self._request_typed(ctx, "GET", f"admin/processes/{path_segment(process_id)}", Process)

    async def kill_process(self, ctx: Optional[RequestContext], process_id: str) -> Response:
        """Kill a running process by id."""
        self._validate(process_id=process_id)
        logger.info(f"Killing process {process_id}")
        return await self._request(ctx, "DELETE", f"admin/processes/{path_segment(process_id)}")
