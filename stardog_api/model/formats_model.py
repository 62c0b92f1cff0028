"""Format Model Classes

Media types, RDF serialization formats and the other enumerations used for
content negotiation with the Stardog server.
"""

from enum import Enum
from pathlib import PurePath
from typing import Union

from ..client.utils.client_utils import StardogConfigurationError


class MediaType:
    """Media types understood by the Stardog HTTP API."""
    APPLICATION_JSON = "application/json"
    PLAIN_TEXT = "text/plain"
    TRIG = "application/trig"
    TURTLE = "text/turtle"
    RDF_XML = "application/rdf+xml"
    N_TRIPLES = "application/n-triples"
    N_QUADS = "application/n-quads"
    JSON_LD = "application/ld+json"
    SPARQL_RESULTS_JSON = "application/sparql-results+json"
    SPARQL_RESULTS_XML = "application/sparql-results+xml"
    SPARQL_QUERY = "application/sparql-query"
    SPARQL_UPDATE = "application/sparql-update"
    CSV = "text/csv"
    TSV = "text/tsv"
    BOOLEAN = "text/boolean"
    MULTIPART_FORM_DATA = "multipart/form-data"
    FORM_URLENCODED = "application/x-www-form-urlencoded"


class RDFFormat(str, Enum):
    """RDF serialization formats; the value is the MIME type."""
    TRIG = MediaType.TRIG
    TURTLE = MediaType.TURTLE
    RDF_XML = MediaType.RDF_XML
    N_TRIPLES = MediaType.N_TRIPLES
    N_QUADS = MediaType.N_QUADS
    JSON_LD = MediaType.JSON_LD

    def __str__(self) -> str:
        return self.value

    @property
    def export_format(self) -> str:
        """Name the export endpoint expects in its ``format`` parameter."""
        return _EXPORT_FORMATS[self]

    @property
    def rdflib_format(self) -> str:
        """Name of the matching rdflib parser plugin."""
        return _RDFLIB_FORMATS[self]

    @property
    def has_named_graphs(self) -> bool:
        return self in (RDFFormat.TRIG, RDFFormat.N_QUADS)

    @classmethod
    def from_extension(cls, path: Union[str, PurePath]) -> "RDFFormat":
        """
        Determine the RDF format from a file's extension.

        Raises:
            StardogConfigurationError: If the extension is not a known RDF extension
        """
        extension = PurePath(path).suffix.lstrip(".").lower()
        try:
            return _EXTENSIONS[extension]
        except KeyError:
            raise StardogConfigurationError(f"unable to determine the RDF Format from file: {path}")


_EXPORT_FORMATS = {
    RDFFormat.TRIG: "trig",
    RDFFormat.TURTLE: "turtle",
    RDFFormat.JSON_LD: "jsonld",
    RDFFormat.N_QUADS: "nquads",
    RDFFormat.N_TRIPLES: "ntriples",
    RDFFormat.RDF_XML: "rdfxml",
}

_RDFLIB_FORMATS = {
    RDFFormat.TRIG: "trig",
    RDFFormat.TURTLE: "turtle",
    RDFFormat.JSON_LD: "json-ld",
    RDFFormat.N_QUADS: "nquads",
    RDFFormat.N_TRIPLES: "nt",
    RDFFormat.RDF_XML: "xml",
}

_EXTENSIONS = {
    "ttl": RDFFormat.TURTLE,
    "rdf": RDFFormat.RDF_XML,
    "rdfs": RDFFormat.RDF_XML,
    "xml": RDFFormat.RDF_XML,
    "owl": RDFFormat.RDF_XML,
    "trig": RDFFormat.TRIG,
    "jsonld": RDFFormat.JSON_LD,
    "json": RDFFormat.JSON_LD,
    "nq": RDFFormat.N_QUADS,
    "nquads": RDFFormat.N_QUADS,
    "nt": RDFFormat.N_TRIPLES,
}


class Compression(str, Enum):
    """Compression for server-side exports."""
    BZ2 = "BZ2"
    ZIP = "ZIP"
    GZIP = "GZIP"

    def __str__(self) -> str:
        return self.value


class DataModelFormat(str, Enum):
    """Output formats of the data model endpoint."""
    TEXT = "text"
    OWL = "owl"
    SHACL = "shacl"
    SQL = "sql"
    GRAPHQL = "graphql"

    def __str__(self) -> str:
        return self.value


class QueryResultFormat(str, Enum):
    """Result formats for SELECT queries."""
    JSON = MediaType.SPARQL_RESULTS_JSON
    XML = MediaType.SPARQL_RESULTS_XML
    CSV = MediaType.CSV
    TSV = MediaType.TSV

    def __str__(self) -> str:
        return self.value
