"""
Stardog Users Endpoint

Client endpoint for user management: accounts, passwords, role assignment
and permissions.
"""

import logging
from typing import List, Optional

from .base_endpoint import BaseEndpoint, JSON_CONTENT, TEXT_ACCEPT, path_segment
from ..request_context import RequestContext
from ..response.client_response import Response
from ...model.permissions_model import EffectivePermission, Permission
from ...model.roles_model import PermissionsResponse, RoleNamesResponse
from ...model.users_model import (
    AssignRoleRequest, ChangePasswordRequest, CreateUserRequest, EffectivePermissionsResponse,
    EnabledResponse, EnableUserRequest, OverwriteRolesRequest, SuperuserResponse, User,
    UserNamesResponse, UsersListResponse
)

logger = logging.getLogger(__name__)


class UsersEndpoint(BaseEndpoint):
    """Client endpoint for user operations."""

    def _user_path(self, username: str, suffix: str = "") -> str:
        self._validate(username=username)
        return f"admin/users/{path_segment(username)}{suffix}"

    async def whoami(self, ctx: Optional[RequestContext]) -> str:
        """Return the username of the authenticated user."""
        return await self._request_text(ctx, "GET", "admin/status/whoami", header_options=TEXT_ACCEPT)

    async def list_names(self, ctx: Optional[RequestContext]) -> List[str]:
        data = await self._request_typed(ctx, "GET", "admin/users", UserNamesResponse)
        return data.users if data else []

    async def list(self, ctx: Optional[RequestContext]) -> List[User]:
        """List all users with their roles, status and effective permissions."""
        data = await self._request_typed(ctx, "GET", "admin/users/list", UsersListResponse)
        return data.users if data else []

    async def permissions(self, ctx: Optional[RequestContext], username: str) -> List[Permission]:
        """Permissions explicitly granted to a user."""
        self._validate(username=username)
        data = await self._request_typed(ctx, "GET", f"admin/permissions/user/{path_segment(username)}",
                                         PermissionsResponse)
        return data.permissions if data else []

    async def effective_permissions(self, ctx: Optional[RequestContext], username: str) -> List[EffectivePermission]:
        """Permissions held by a user, explicitly or through roles."""
        self._validate(username=username)
        data = await self._request_typed(ctx, "GET",
                                         f"admin/permissions/effective/user/{path_segment(username)}",
                                         EffectivePermissionsResponse)
        return data.permissions if data else []

    async def get(self, ctx: Optional[RequestContext], username: str) -> Optional[User]:
        """
        Get the details of a single user.

        The server does not echo the username, so it is filled in from the argument.
        """
        user = await self._request_typed(ctx, "GET", self._user_path(username), User)
        if user is not None and user.username is None:
            user.username = username
        return user

    async def is_superuser(self, ctx: Optional[RequestContext], username: str) -> bool:
        data = await self._request_typed(ctx, "GET", self._user_path(username, "/superuser"), SuperuserResponse)
        return bool(data and data.superuser)

    async def is_enabled(self, ctx: Optional[RequestContext], username: str) -> bool:
        data = await self._request_typed(ctx, "GET", self._user_path(username, "/enabled"), EnabledResponse)
        return bool(data and data.enabled)

    async def create(self, ctx: Optional[RequestContext], username: str, password: str) -> Response:
        """Create a user. The user is enabled and holds no roles or permissions."""
        self._validate(username=username, password=password)
        body = CreateUserRequest(username=username, password=list(password))
        logger.info(f"Creating user {username}")
        return await self._request(ctx, "POST", "admin/users", header_options=JSON_CONTENT, body=body)

    async def delete(self, ctx: Optional[RequestContext], username: str) -> Response:
        path = self._user_path(username)
        logger.info(f"Deleting user {username}")
        return await self._request(ctx, "DELETE", path)

    async def change_password(self, ctx: Optional[RequestContext], username: str, password: str) -> Response:
        self._validate(password=password)
        return await self._request(ctx, "PUT", self._user_path(username, "/pwd"),
                                   header_options=JSON_CONTENT, body=ChangePasswordRequest(password=password))

    async def enable(self, ctx: Optional[RequestContext], username: str) -> Response:
        return await self._request(ctx, "PUT", self._user_path(username, "/enabled"),
                                   header_options=JSON_CONTENT, body=EnableUserRequest(enabled=True))

    async def disable(self, ctx: Optional[RequestContext], username: str) -> Response:
        return await self._request(ctx, "PUT", self._user_path(username, "/enabled"),
                                   header_options=JSON_CONTENT, body=EnableUserRequest(enabled=False))

    async def grant_permission(self, ctx: Optional[RequestContext], username: str,
                               permission: Permission) -> Response:
        self._validate(username=username)
        return await self._request(ctx, "PUT", f"admin/permissions/user/{path_segment(username)}",
                                   header_options=JSON_CONTENT, body=permission)

    async def revoke_permission(self, ctx: Optional[RequestContext], username: str,
                                permission: Permission) -> Response:
        self._validate(username=username)
        return await self._request(ctx, "POST", f"admin/permissions/user/{path_segment(username)}/delete",
                                   header_options=JSON_CONTENT, body=permission)

    async def list_names_assigned_role(self, ctx: Optional[RequestContext], rolename: str) -> List[str]:
        """Names of the users that hold a role."""
        self._validate(rolename=rolename)
        data = await self._request_typed(ctx, "GET", f"admin/roles/{path_segment(rolename)}/users",
                                         UserNamesResponse)
        return data.users if data else []

    async def assign_role(self, ctx: Optional[RequestContext], username: str, rolename: str) -> Response:
        self._validate(rolename=rolename)
        return await self._request(ctx, "POST", self._user_path(username, "/roles"),
                                   header_options=JSON_CONTENT, body=AssignRoleRequest(rolename=rolename))

    async def unassign_role(self, ctx: Optional[RequestContext], username: str, rolename: str) -> Response:
        self._validate(rolename=rolename)
        return await self._request(ctx, "DELETE", self._user_path(username, f"/roles/{path_segment(rolename)}"))

    async def overwrite_roles(self, ctx: Optional[RequestContext], username: str, roles: List[str]) -> Response:
        """Replace every role held by a user with ``roles``."""
        return await self._request(ctx, "PUT", self._user_path(username, "/roles"),
                                   header_options=JSON_CONTENT, body=OverwriteRolesRequest(roles=roles))

    async def roles(self, ctx: Optional[RequestContext], username: str) -> List[str]:
        """Names of the roles assigned to a user."""
        data = await self._request_typed(ctx, "GET", self._user_path(username, "/roles"), RoleNamesResponse)
        return data.roles if data else []
