"""Roles Model Classes

Pydantic models for role management operations.
"""

from typing import Annotated, List

from pydantic import BaseModel, Field

from ..client.utils.query_options import QueryOptions, QueryParam
from .permissions_model import Permission


class Role(BaseModel):
    """A role and the permissions granted to it."""
    name: str = Field(..., alias="rolename", description="Role name")
    permissions: List[Permission] = Field(default_factory=list, description="Permissions granted to the role")

    model_config = {"populate_by_name": True}


class RoleNamesResponse(BaseModel):
    roles: List[str] = Field(default_factory=list)


class RolesListResponse(BaseModel):
    roles: List[Role] = Field(default_factory=list)


class PermissionsResponse(BaseModel):
    permissions: List[Permission] = Field(default_factory=list)


class CreateRoleRequest(BaseModel):
    rolename: str


class DeleteRoleOptions(QueryOptions):
    """Options for deleting a role."""
    # remove the role even if it is assigned to users
    force: Annotated[bool, QueryParam("force")] = False
