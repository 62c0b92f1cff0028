"""SPARQL Model Classes

Pydantic models for SPARQL query results and query options.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..client.utils.query_options import QueryOptions, QueryParam


class SparqlQueryOptions(QueryOptions):
    """Per-query parameters understood by the query and update endpoints."""
    reasoning: Annotated[bool, QueryParam("reasoning", omit_empty=True)] = False
    limit: Annotated[Optional[int], QueryParam("limit", omit_empty=True)] = None
    offset: Annotated[Optional[int], QueryParam("offset", omit_empty=True)] = None
    # server-side query timeout in milliseconds
    timeout: Annotated[Optional[int], QueryParam("timeout", omit_empty=True)] = None
    default_graph_uri: Annotated[List[str], QueryParam("default-graph-uri", omit_empty=True)] = Field(default_factory=list)
    named_graph_uri: Annotated[List[str], QueryParam("named-graph-uri", omit_empty=True)] = Field(default_factory=list)


class SparqlResultsHead(BaseModel):
    vars: List[str] = Field(default_factory=list)
    link: List[str] = Field(default_factory=list)


class SparqlResultsBindings(BaseModel):
    bindings: List[Dict[str, Dict[str, Any]]] = Field(default_factory=list)


class SparqlResults(BaseModel):
    """SPARQL 1.1 query results in their JSON serialization."""
    head: SparqlResultsHead = Field(default_factory=SparqlResultsHead)
    results: Optional[SparqlResultsBindings] = None
    boolean: Optional[bool] = None

    def rows(self) -> List[Dict[str, Any]]:
        """Flatten bindings into ``{variable: value}`` rows."""
        if self.results is None:
            return []
        return [
            {name: term.get("value") for name, term in binding.items()}
            for binding in self.results.bindings
        ]
