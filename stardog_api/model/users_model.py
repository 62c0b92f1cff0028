"""Users Model Classes

Pydantic models for user management operations.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .permissions_model import EffectivePermission


class User(BaseModel):
    """A Stardog user account with its roles and effective permissions."""
    username: Optional[str] = Field(None, description="Username (absent in single-user lookups)")
    enabled: bool = Field(False, description="Whether the user may log in")
    superuser: bool = Field(False, description="Whether the user is a superuser")
    roles: List[str] = Field(default_factory=list, description="Roles assigned to the user")
    effective_permissions: List[EffectivePermission] = Field(
        default_factory=list,
        alias="permissions",
        description="Permissions held explicitly or through roles"
    )

    model_config = {"populate_by_name": True}


class UserNamesResponse(BaseModel):
    users: List[str] = Field(default_factory=list)


class UsersListResponse(BaseModel):
    users: List[User] = Field(default_factory=list)


class EffectivePermissionsResponse(BaseModel):
    permissions: List[EffectivePermission] = Field(default_factory=list)


class SuperuserResponse(BaseModel):
    superuser: bool


class EnabledResponse(BaseModel):
    enabled: bool


class CreateUserRequest(BaseModel):
    """Request body for user creation. The server expects the password as a list of characters."""
    username: str
    password: List[str]


class ChangePasswordRequest(BaseModel):
    password: str


class AssignRoleRequest(BaseModel):
    rolename: str


class OverwriteRolesRequest(BaseModel):
    roles: List[str]


class EnableUserRequest(BaseModel):
    enabled: bool
