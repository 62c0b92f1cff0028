"""
Stardog SPARQL Endpoint

Client endpoint for SPARQL query and update execution against a database,
optionally inside an open transaction.
"""

import logging
from typing import Optional, Union
from urllib.parse import urlencode

from rdflib import Dataset, Graph

from .base_endpoint import BaseEndpoint, path_segment
from ..request_context import RequestContext
from ..request_options import RequestHeaderOptions
from ..response.client_response import Response
from ..utils.client_utils import StardogDecodeError
from ..utils.query_options import add_options
from ...model.formats_model import MediaType, QueryResultFormat, RDFFormat
from ...model.sparql_model import SparqlQueryOptions, SparqlResults

logger = logging.getLogger(__name__)


class SparqlEndpoint(BaseEndpoint):
    """
    Client endpoint for SPARQL operations.

    Queries are posted form-encoded to ``{db}/query`` and updates to
    ``{db}/update``; with a transaction id the paths become
    ``{db}/{tx}/query`` and ``{db}/{tx}/update``.
    """

    def _path(self, database: str, operation: str, transaction_id: Optional[str],
              options: Optional[SparqlQueryOptions]) -> str:
        self._validate(database=database)
        path = path_segment(database)
        if transaction_id is not None:
            self._validate(transaction_id=transaction_id)
            path += f"/{path_segment(transaction_id)}"
        return add_options(f"{path}/{operation}", options)

    async def _query(self, ctx: Optional[RequestContext], database: str, query: str, accept: str,
                     options: Optional[SparqlQueryOptions], transaction_id: Optional[str]) -> bytes:
        self._validate(query=query)
        path = self._path(database, "query", transaction_id, options)
        header_options = RequestHeaderOptions(content_type=MediaType.FORM_URLENCODED, accept=accept)
        logger.debug(f"Executing SPARQL query on {database}")
        return await self._request_bytes(ctx, "POST", path, header_options=header_options,
                                         content=urlencode({"query": query}))

    async def select(self, ctx: Optional[RequestContext], database: str, query: str,
                     options: Optional[SparqlQueryOptions] = None, *,
                     transaction_id: Optional[str] = None) -> SparqlResults:
        """
        Execute a SELECT query and decode the SPARQL JSON results.

        Returns:
            SparqlResults with ``head.vars`` and ``results.bindings``
        """
        self._validate(query=query)
        path = self._path(database, "query", transaction_id, options)
        header_options = RequestHeaderOptions(content_type=MediaType.FORM_URLENCODED,
                                              accept=MediaType.SPARQL_RESULTS_JSON)
        results = await self._request_typed(ctx, "POST", path, SparqlResults, header_options=header_options,
                                            content=urlencode({"query": query}))
        return results if results is not None else SparqlResults()

    async def query_raw(self, ctx: Optional[RequestContext], database: str, query: str,
                        result_format: Union[QueryResultFormat, RDFFormat, str] = QueryResultFormat.JSON,
                        options: Optional[SparqlQueryOptions] = None, *,
                        transaction_id: Optional[str] = None) -> bytes:
        """Execute any query and return the results serialized in ``result_format`` (XML, CSV, TSV, RDF, ...)."""
        accept = result_format.value if isinstance(result_format, (QueryResultFormat, RDFFormat)) else result_format
        return await self._query(ctx, database, query, accept, options, transaction_id)

    async def ask(self, ctx: Optional[RequestContext], database: str, query: str,
                  options: Optional[SparqlQueryOptions] = None, *,
                  transaction_id: Optional[str] = None) -> bool:
        """Execute an ASK query."""
        data = await self._query(ctx, database, query, MediaType.BOOLEAN, options, transaction_id)
        value = data.decode("utf-8").strip().lower()
        if value not in ("true", "false"):
            raise StardogDecodeError(f"ASK result is not a boolean: {value!r}")
        return value == "true"

    async def construct(self, ctx: Optional[RequestContext], database: str, query: str,
                        rdf_format: RDFFormat = RDFFormat.TURTLE,
                        options: Optional[SparqlQueryOptions] = None, *,
                        transaction_id: Optional[str] = None) -> bytes:
        """Execute a CONSTRUCT or DESCRIBE query and return the graph serialized in ``rdf_format``."""
        return await self._query(ctx, database, query, RDFFormat(rdf_format).value, options, transaction_id)

    async def update(self, ctx: Optional[RequestContext], database: str, update: str,
                     options: Optional[SparqlQueryOptions] = None, *,
                     transaction_id: Optional[str] = None) -> Response:
        """Execute a SPARQL update."""
        self._validate(update=update)
        path = self._path(database, "update", transaction_id, options)
        header_options = RequestHeaderOptions(content_type=MediaType.FORM_URLENCODED)
        logger.debug(f"Executing SPARQL update on {database}")
        return await self._request(ctx, "POST", path, header_options=header_options,
                                   content=urlencode({"update": update}))

    async def construct_graph(self, ctx: Optional[RequestContext], database: str, query: str,
                              rdf_format: RDFFormat = RDFFormat.TURTLE,
                              options: Optional[SparqlQueryOptions] = None, *,
                              transaction_id: Optional[str] = None) -> Graph:
        """
        Execute a CONSTRUCT or DESCRIBE query and parse the result with rdflib.

        Quad formats (TriG, N-Quads) are parsed into an rdflib ``Dataset``.

        Raises:
            StardogDecodeError: If the result cannot be parsed as ``rdf_format``
        """
        rdf_format = RDFFormat(rdf_format)
        data = await self.construct(ctx, database, query, rdf_format, options, transaction_id=transaction_id)
        graph = Dataset() if rdf_format.has_named_graphs else Graph()
        if not data.strip():
            return graph
        try:
            graph.parse(data=data.decode("utf-8"), format=rdf_format.rdflib_format)
        except Exception as e:
            raise StardogDecodeError(f"Failed to parse {rdf_format.value} result: {e}") from e
        return graph
