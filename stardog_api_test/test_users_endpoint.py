"""Tests for UsersEndpoint."""

import pytest

from stardog_api.client.utils.client_utils import StardogConfigurationError
from stardog_api.model.permissions_model import Permission, PermissionAction, PermissionResourceType


@pytest.mark.asyncio
async def test_whoami(client, server, ctx):
    server.respond(200, content=b"admin")
    assert await client.users.whoami(ctx) == "admin"
    assert server.last.url.path == "/admin/status/whoami"
    assert server.last.headers["Accept"] == "text/plain"


@pytest.mark.asyncio
async def test_list_names(client, server, ctx):
    server.respond(200, json_body={"users": ["admin", "anonymous"]})
    assert await client.users.list_names(ctx) == ["admin", "anonymous"]
    assert server.last.url.path == "/admin/users"


@pytest.mark.asyncio
async def test_list(client, server, ctx):
    server.respond(200, json_body={"users": [{
        "username": "frodo",
        "enabled": True,
        "superuser": False,
        "roles": ["reader"],
        "permissions": [
            {"action": "read", "resource_type": "db", "resource": ["movies"], "explicit": False},
        ],
    }]})
    users = await client.users.list(ctx)
    assert users[0].username == "frodo"
    assert users[0].effective_permissions[0].action == PermissionAction.READ
    assert users[0].effective_permissions[0].resource_type == PermissionResourceType.DATABASE
    assert server.last.url.path == "/admin/users/list"


@pytest.mark.asyncio
async def test_get_fills_username(client, server, ctx):
    server.respond(200, json_body={"enabled": True, "superuser": True, "roles": [], "permissions": []})
    user = await client.users.get(ctx, "admin")
    assert user.username == "admin"
    assert user.superuser is True
    assert server.last.url.path == "/admin/users/admin"


@pytest.mark.asyncio
async def test_permissions(client, server, ctx):
    server.respond(200, json_body={"permissions": [
        {"action": "write", "resource_type": "named-graph", "resource": ["movies", "urn:g"]},
    ]})
    permissions = await client.users.permissions(ctx, "frodo")
    assert permissions[0].resource == ["movies", "urn:g"]
    assert server.last.url.path == "/admin/permissions/user/frodo"


@pytest.mark.asyncio
async def test_effective_permissions(client, server, ctx):
    server.respond(200, json_body={"permissions": [
        {"action": "read", "resource_type": "*", "resource": ["*"], "explicit": True},
    ]})
    permissions = await client.users.effective_permissions(ctx, "frodo")
    assert permissions[0].explicit is True
    assert server.last.url.path == "/admin/permissions/effective/user/frodo"


@pytest.mark.asyncio
async def test_is_superuser_and_enabled(client, server, ctx):
    server.respond(200, json_body={"superuser": True})
    assert await client.users.is_superuser(ctx, "admin") is True
    assert server.last.url.path == "/admin/users/admin/superuser"

    server.respond(200, json_body={"enabled": False})
    assert await client.users.is_enabled(ctx, "admin") is False
    assert server.last.url.path == "/admin/users/admin/enabled"


@pytest.mark.asyncio
async def test_create_sends_password_characters(client, server, ctx):
    server.respond(201)
    await client.users.create(ctx, "frodo", "ring")
    assert server.last.method == "POST"
    assert server.last.url.path == "/admin/users"
    assert server.last.headers["Content-Type"] == "application/json"
    assert server.last_json() == {"username": "frodo", "password": ["r", "i", "n", "g"]}


@pytest.mark.asyncio
async def test_create_requires_username(client, server, ctx):
    with pytest.raises(StardogConfigurationError):
        await client.users.create(ctx, "", "ring")
    assert server.requests == []


@pytest.mark.asyncio
async def test_delete(client, server, ctx):
    server.respond(204)
    await client.users.delete(ctx, "frodo")
    assert server.last.method == "DELETE"
    assert server.last.url.path == "/admin/users/frodo"


@pytest.mark.asyncio
async def test_change_password(client, server, ctx):
    server.respond(200)
    await client.users.change_password(ctx, "frodo", "mithril")
    assert server.last.method == "PUT"
    assert server.last.url.path == "/admin/users/frodo/pwd"
    assert server.last_json() == {"password": "mithril"}


@pytest.mark.asyncio
async def test_enable_disable(client, server, ctx):
    server.respond(200)
    await client.users.enable(ctx, "frodo")
    assert server.last.method == "PUT"
    assert server.last_json() == {"enabled": True}
    await client.users.disable(ctx, "frodo")
    assert server.last.url.path == "/admin/users/frodo/enabled"
    assert server.last_json() == {"enabled": False}


@pytest.mark.asyncio
async def test_grant_and_revoke_permission(client, server, ctx):
    server.respond(201)
    permission = Permission(action=PermissionAction.READ, resource_type=PermissionResourceType.DATABASE,
                            resource=["movies"])
    await client.users.grant_permission(ctx, "frodo", permission)
    assert server.last.method == "PUT"
    assert server.last.url.path == "/admin/permissions/user/frodo"
    assert server.last_json() == {"action": "read", "resource_type": "db", "resource": ["movies"]}

    await client.users.revoke_permission(ctx, "frodo", permission)
    assert server.last.method == "POST"
    assert server.last.url.path == "/admin/permissions/user/frodo/delete"


@pytest.mark.asyncio
async def test_role_assignment(client, server, ctx):
    server.respond(200, json_body={"users": ["frodo", "sam"]})
    assert await client.users.list_names_assigned_role(ctx, "reader") == ["frodo", "sam"]
    assert server.last.url.path == "/admin/roles/reader/users"

    server.respond(204)
    await client.users.assign_role(ctx, "frodo", "reader")
    assert server.last.method == "POST"
    assert server.last.url.path == "/admin/users/frodo/roles"
    assert server.last_json() == {"rolename": "reader"}

    await client.users.unassign_role(ctx, "frodo", "reader")
    assert server.last.method == "DELETE"
    assert server.last.url.path == "/admin/users/frodo/roles/reader"

    await client.users.overwrite_roles(ctx, "frodo", ["reader", "writer"])
    assert server.last.method == "PUT"
    assert server.last_json() == {"roles": ["reader", "writer"]}


@pytest.mark.asyncio
async def test_roles(client, server, ctx):
    server.respond(200, json_body={"roles": ["reader"]})
    assert await client.users.roles(ctx, "frodo") == ["reader"]
    assert server.last.url.path == "/admin/users/frodo/roles"


@pytest.mark.asyncio
async def test_username_is_path_encoded(client, server, ctx):
    server.respond(204)
    await client.users.delete(ctx, "first last")
    assert server.last.url.raw_path == b"/admin/users/first%20last"
