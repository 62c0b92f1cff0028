"""Tests for DataSourcesEndpoint and VirtualGraphsEndpoint."""

import pytest

from stardog_api.client.utils.client_utils import StardogDecodeError
from stardog_api.model.data_sources_model import DeleteDataSourceOptions, RefreshDataSourceOptions


@pytest.mark.asyncio
async def test_list_names(client, server, ctx):
    server.respond(200, json_body={"data_sources": ["pg", "mysql"]})
    assert await client.data_sources.list_names(ctx) == ["pg", "mysql"]
    assert server.last.url.path == "/admin/data_sources"


@pytest.mark.asyncio
async def test_list(client, server, ctx):
    server.respond(200, json_body={"data_sources": [
        {"entityName": "pg", "sharable": True, "available": False},
    ]})
    data_sources = await client.data_sources.list(ctx)
    assert data_sources[0].name == "pg"
    assert data_sources[0].shareable is True
    assert data_sources[0].available is False
    assert server.last.url.path == "/admin/data_sources/list"


@pytest.mark.asyncio
@pytest.mark.parametrize("body, expected", [(b"true", True), (b"false", False)])
async def test_is_available(client, server, ctx, body, expected):
    server.respond(200, content=body)
    assert await client.data_sources.is_available(ctx, "pg") is expected
    assert server.last.url.path == "/admin/data_sources/pg/available"
    assert server.last.headers["Accept"] == "text/plain"


@pytest.mark.asyncio
async def test_is_available_garbage(client, server, ctx):
    server.respond(200, content=b"maybe")
    with pytest.raises(StardogDecodeError):
        await client.data_sources.is_available(ctx, "pg")


@pytest.mark.asyncio
async def test_options(client, server, ctx):
    server.respond(200, json_body={"options": {"jdbc.url": "jdbc:postgresql://db/movies"}})
    assert await client.data_sources.options(ctx, "pg") == {"jdbc.url": "jdbc:postgresql://db/movies"}
    assert server.last.url.path == "/admin/data_sources/pg/options"


@pytest.mark.asyncio
async def test_add_and_update(client, server, ctx):
    server.respond(201)
    await client.data_sources.add(ctx, "pg", {"jdbc.url": "jdbc:postgresql://db/movies"})
    assert server.last.method == "POST"
    assert server.last_json() == {"name": "pg", "options": {"jdbc.url": "jdbc:postgresql://db/movies"}}

    await client.data_sources.update(ctx, "pg", {"jdbc.password": "secret"})
    assert server.last.method == "PUT"
    assert server.last.url.path == "/admin/data_sources/pg"
    assert server.last_json() == {"options": {"jdbc.password": "secret"}}


@pytest.mark.asyncio
async def test_refresh_sends_empty_object_without_table(client, server, ctx):
    server.respond(200)
    await client.data_sources.refresh_metadata(ctx, "pg")
    assert server.last.url.path == "/admin/data_sources/pg/refresh_metadata"
    assert server.last_json() == {}


@pytest.mark.asyncio
async def test_refresh_counts_for_table(client, server, ctx):
    server.respond(200)
    await client.data_sources.refresh_counts(ctx, "pg", RefreshDataSourceOptions(table="public.movies"))
    assert server.last.url.path == "/admin/data_sources/pg/refresh_counts"
    assert server.last_json() == {"name": "public.movies"}


@pytest.mark.asyncio
@pytest.mark.parametrize("operation, suffix", [
    ("share", "/share"),
    ("test_existing", "/test_data_source"),
    ("online", "/online"),
])
async def test_post_operations(client, server, ctx, operation, suffix):
    server.respond(200)
    await getattr(client.data_sources, operation)(ctx, "pg")
    assert server.last.method == "POST"
    assert server.last.url.path == f"/admin/data_sources/pg{suffix}"


@pytest.mark.asyncio
async def test_delete(client, server, ctx):
    server.respond(204)
    await client.data_sources.delete(ctx, "pg", DeleteDataSourceOptions(force=True))
    assert server.last.method == "DELETE"
    assert server.last.url.params["force"] == "true"

    await client.data_sources.delete(ctx, "pg", DeleteDataSourceOptions())
    assert "force" not in server.last.url.params


@pytest.mark.asyncio
async def test_virtual_graphs(client, server, ctx):
    server.respond(200, json_body={"virtual_graphs": ["virtual://movies"]})
    assert await client.virtual_graphs.list_names(ctx) == ["virtual://movies"]
    assert server.last.url.path == "/admin/virtual_graphs"

    server.respond(200, json_body={"virtual_graphs": [
        {"name": "virtual://movies", "data_source": "data-source://pg", "database": "movies", "available": True},
    ]})
    virtual_graphs = await client.virtual_graphs.list(ctx)
    assert virtual_graphs[0].data_source == "data-source://pg"
    assert server.last.url.path == "/admin/virtual_graphs/list"
