"""Tests for RolesEndpoint."""

import pytest

from stardog_api.model.permissions_model import Permission, PermissionAction, PermissionResourceType
from stardog_api.model.roles_model import DeleteRoleOptions


@pytest.mark.asyncio
async def test_list_names(client, server, ctx):
    server.respond(200, json_body={"roles": ["reader", "writer"]})
    assert await client.roles.list_names(ctx) == ["reader", "writer"]
    assert server.last.url.path == "/admin/roles"


@pytest.mark.asyncio
async def test_list(client, server, ctx):
    server.respond(200, json_body={"roles": [{
        "rolename": "reader",
        "permissions": [{"action": "read", "resource_type": "db", "resource": ["*"]}],
    }]})
    roles = await client.roles.list(ctx)
    assert roles[0].name == "reader"
    assert roles[0].permissions[0].resource == ["*"]
    assert server.last.url.path == "/admin/roles/list"


@pytest.mark.asyncio
async def test_create(client, server, ctx):
    server.respond(201)
    await client.roles.create(ctx, "reader")
    assert server.last.method == "POST"
    assert server.last_json() == {"rolename": "reader"}


@pytest.mark.asyncio
async def test_permissions(client, server, ctx):
    server.respond(200, json_body={"permissions": [{"action": "all", "resource_type": "*", "resource": "*"}]})
    permissions = await client.roles.permissions(ctx, "admin-role")
    assert permissions[0].action == PermissionAction.ALL
    assert permissions[0].resource == ["*"]
    assert server.last.url.path == "/admin/permissions/role/admin-role"


@pytest.mark.asyncio
async def test_grant_and_revoke(client, server, ctx):
    server.respond(201)
    permission = Permission(action=PermissionAction.WRITE, resource_type=PermissionResourceType.NAMED_GRAPH,
                            resource=["movies", "urn:g"])
    await client.roles.grant_permission(ctx, "writer", permission)
    assert server.last.method == "PUT"
    assert server.last.url.path == "/admin/permissions/role/writer"
    assert server.last_json()["resource_type"] == "named-graph"

    await client.roles.revoke_permission(ctx, "writer", permission)
    assert server.last.method == "POST"
    assert server.last.url.path == "/admin/permissions/role/writer/delete"


@pytest.mark.asyncio
async def test_delete(client, server, ctx):
    server.respond(204)
    await client.roles.delete(ctx, "reader", DeleteRoleOptions(force=True))
    assert server.last.method == "DELETE"
    assert server.last.url.path == "/admin/roles/reader"
    assert server.last.url.params["force"] == "true"


@pytest.mark.asyncio
async def test_delete_without_options(client, server, ctx):
    server.respond(204)
    await client.roles.delete(ctx, "reader")
    assert str(server.last.url) == "http://localhost:5820/admin/roles/reader"
