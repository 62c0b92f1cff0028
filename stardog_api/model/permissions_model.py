"""Permissions Model Classes

Pydantic models for the Stardog security model: a user or role may perform an
action (e.g. read) over a resource (e.g. db:myDatabase).
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator


class PermissionAction(str, Enum):
    """Actions that can be granted in a permission."""
    READ = "read"
    WRITE = "write"
    CREATE = "create"
    DELETE = "delete"
    GRANT = "grant"
    REVOKE = "revoke"
    EXECUTE = "execute"
    ALL = "all"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class PermissionResourceType(str, Enum):
    """Kinds of resources a permission applies to."""
    DATABASE = "db"
    METADATA = "metadata"
    USER = "user"
    ROLE = "role"
    NAMED_GRAPH = "named-graph"
    VIRTUAL_GRAPH = "virtual-graph"
    DATA_SOURCE = "data-source"
    SERVER_ADMIN = "dbms-admin"
    DATABASE_ADMIN = "admin"
    SENSITIVE_PROPERTY = "sensitive-property"
    STORED_QUERY = "stored-query"
    ALL = "*"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class Permission(BaseModel):
    """A permission granted to a user or role."""
    action: PermissionAction = Field(..., description="Access level, e.g. read")
    resource_type: PermissionResourceType = Field(..., description="Type of resource, e.g. db")
    resource: List[str] = Field(default_factory=list, description="Resource identifiers, e.g. ['myDatabase']")

    @field_validator("resource", mode="before")
    @classmethod
    def _coerce_resource(cls, value):
        if isinstance(value, str):
            return [value]
        return value


class EffectivePermission(Permission):
    """A permission held explicitly or implicitly through a role assignment."""
    explicit: bool = Field(False, description="Whether the permission is explicitly assigned to the user")
