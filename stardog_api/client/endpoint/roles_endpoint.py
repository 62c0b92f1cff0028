"""
Stardog Roles Endpoint

Client endpoint for role management and role permissions.
"""

import logging
from typing import List, Optional

from .base_endpoint import BaseEndpoint, JSON_ACCEPT, JSON_CONTENT, path_segment
from ..request_context import RequestContext
from ..response.client_response import Response
from ..utils.query_options import add_options
from ...model.permissions_model import Permission
from ...model.roles_model import (
    CreateRoleRequest, DeleteRoleOptions, PermissionsResponse, Role, RoleNamesResponse, RolesListResponse
)

logger = logging.getLogger(__name__)


class RolesEndpoint(BaseEndpoint):
    """Client endpoint for role operations."""

    async def list_names(self, ctx: Optional[RequestContext]) -> List[str]:
        data = await self._request_typed(ctx, "GET", "admin/roles", RoleNamesResponse)
        return data.roles if data else []

    async def list(self, ctx: Optional[RequestContext]) -> List[Role]:
        """List all roles with their permissions."""
        data = await self._request_typed(ctx, "GET", "admin/roles/list", RolesListResponse)
        return data.roles if data else []

    async def create(self, ctx: Optional[RequestContext], rolename: str) -> Response:
        self._validate(rolename=rolename)
        logger.info(f"Creating role {rolename}")
        return await self._request(ctx, "POST", "admin/roles", header_options=JSON_CONTENT,
                                   body=CreateRoleRequest(rolename=rolename))

    async def permissions(self, ctx: Optional[RequestContext], rolename: str) -> List[Permission]:
        self._validate(rolename=rolename)
        data = await self._request_typed(ctx, "GET", f"admin/permissions/role/{path_segment(rolename)}",
                                         PermissionsResponse)
        return data.permissions if data else []

    async def grant_permission(self, ctx: Optional[RequestContext], rolename: str,
                               permission: Permission) -> Response:
        self._validate(rolename=rolename)
        return await self._request(ctx, "PUT", f"admin/permissions/role/{path_segment(rolename)}",
                                   header_options=JSON_CONTENT, body=permission)

    async def revoke_permission(self, ctx: Optional[RequestContext], rolename: str,
                                permission: Permission) -> Response:
        self._validate(rolename=rolename)
        return await self._request(ctx, "POST", f"admin/permissions/role/{path_segment(rolename)}/delete",
                                   header_options=JSON_CONTENT, body=permission)

    async def delete(self, ctx: Optional[RequestContext], rolename: str,
                     options: Optional[DeleteRoleOptions] = None) -> Response:
        """
        Delete a role.

        Fails while the role is assigned to users unless ``DeleteRoleOptions.force`` is set.
        """
        self._validate(rolename=rolename)
        path = add_options(f"admin/roles/{path_segment(rolename)}", options)
        logger.info(f"Deleting role {rolename}")
        return await self._request(ctx, "DELETE", path, header_options=JSON_ACCEPT)
