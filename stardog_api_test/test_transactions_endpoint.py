"""Tests for TransactionsEndpoint and StoredQueriesEndpoint."""

import pytest

from stardog_api.model.formats_model import RDFFormat
from stardog_api.model.stored_queries_model import StoredQuery
from stardog_api.model.transactions_model import TransactionDataOptions


@pytest.mark.asyncio
async def test_begin(client, server, ctx):
    server.respond(200, content=b"5f1b0a3e-tx\n")
    assert await client.transactions.begin(ctx, "movies") == "5f1b0a3e-tx"
    assert server.last.method == "POST"
    assert server.last.url.path == "/movies/transaction/begin"
    assert server.last.headers["Accept"] == "text/plain"


@pytest.mark.asyncio
async def test_commit_and_rollback(client, server, ctx):
    server.respond(200)
    await client.transactions.commit(ctx, "movies", "tx1")
    assert server.last.url.path == "/movies/transaction/commit/tx1"
    await client.transactions.rollback(ctx, "movies", "tx1")
    assert server.last.url.path == "/movies/transaction/rollback/tx1"
    assert server.last.method == "POST"


@pytest.mark.asyncio
async def test_add(client, server, ctx):
    server.respond(200)
    data = "<urn:a> <urn:b> <urn:c> ."
    await client.transactions.add(ctx, "movies", "tx1", data, RDFFormat.N_TRIPLES,
                                  TransactionDataOptions(graph_uri="urn:g"))
    request = server.last
    assert request.url.path == "/movies/tx1/add"
    assert request.url.params["graph-uri"] == "urn:g"
    assert request.headers["Content-Type"] == "application/n-triples"
    assert request.content == data.encode("utf-8")


@pytest.mark.asyncio
async def test_remove(client, server, ctx):
    server.respond(200)
    await client.transactions.remove(ctx, "movies", "tx1", b"<urn:a> <urn:b> <urn:c> .")
    assert server.last.url.path == "/movies/tx1/remove"
    assert server.last.headers["Content-Type"] == "text/turtle"


@pytest.mark.asyncio
async def test_stored_queries_list(client, server, ctx):
    server.respond(200, json_body={"queries": [{
        "name": "all-movies", "description": "", "database": "movies",
        "query": "select * {?s ?p ?o}", "shared": True, "reasoning": False, "creator": "admin",
    }]})
    queries = await client.stored_queries.list(ctx)
    assert queries[0].name == "all-movies"
    assert queries[0].shared is True
    assert server.last.url.path == "/admin/queries/stored"


@pytest.mark.asyncio
async def test_stored_queries_create_or_update(client, server, ctx):
    server.respond(204)
    query = StoredQuery(name="all-movies", database="movies", query="select * {?s ?p ?o}")
    await client.stored_queries.create_or_update(ctx, query)
    assert server.last.method == "PUT"
    assert server.last.headers["Content-Type"] == "application/json"
    assert server.last_json() == {
        "name": "all-movies", "description": "", "database": "movies",
        "query": "select * {?s ?p ?o}", "shared": False, "reasoning": False,
    }


@pytest.mark.asyncio
async def test_stored_queries_delete(client, server, ctx):
    server.respond(204)
    await client.stored_queries.delete(ctx, "all-movies")
    assert server.last.method == "DELETE"
    assert server.last.url.path == "/admin/queries/stored/all-movies"
