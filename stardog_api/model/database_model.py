"""Database Model Classes

Pydantic models and per-call options for database administration.
"""

from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..client.utils.query_options import QueryOptions, QueryParam
from .formats_model import Compression, DataModelFormat, RDFFormat


class Namespace(BaseModel):
    """A namespace (prefix declaration) stored in a database."""
    prefix: str
    name: str


class NamespacesResponse(BaseModel):
    namespaces: List[Namespace] = Field(default_factory=list)


class ImportNamespacesResponse(BaseModel):
    """Result of importing the namespaces declared in an RDF file."""
    number_imported_namespaces: int = Field(0, alias="numImportedNamespaces")
    updated_namespaces: List[str] = Field(default_factory=list, alias="namespaces")

    model_config = {"populate_by_name": True}


class DatabaseOptionDetails(BaseModel):
    """Documentation of a single database configuration option."""
    name: str
    type: Optional[str] = None
    server: bool = False
    mutable: bool = False
    mutable_when_online: bool = Field(False, alias="mutableWhenOnline")
    category: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    default_value: Any = Field(None, alias="defaultValue")

    model_config = {"populate_by_name": True}


class DatabaseNamesResponse(BaseModel):
    databases: List[str] = Field(default_factory=list)


class DatabasesWithMetadataResponse(BaseModel):
    databases: List[Dict[str, Any]] = Field(default_factory=list)


class CreateDatabaseResponse(BaseModel):
    message: Optional[str] = None


class Dataset(BaseModel):
    """A file to bulk load at database creation, optionally into a named graph."""
    path: Path
    named_graph: Optional[str] = None


class CreateDatabaseFile(BaseModel):
    filename: str
    context: Optional[str] = None


class CreateDatabaseRequest(BaseModel):
    """JSON descriptor sent as the ``root`` field of the creation form."""
    name: str = Field(..., alias="dbname")
    options: Dict[str, Any] = Field(default_factory=dict)
    files: List[CreateDatabaseFile] = Field(default_factory=list)
    copy_to_server: bool = Field(False, alias="copyToServer")

    model_config = {"populate_by_name": True}


class CreateDatabaseOptions(BaseModel):
    """
    Optional parameters for database creation.

    Dataset paths are assumed to exist on the server unless ``copy_to_server``
    is set, in which case the files are read locally and uploaded.
    """
    datasets: List[Dataset] = Field(default_factory=list)
    database_options: Dict[str, Any] = Field(default_factory=dict)
    copy_to_server: bool = False


class DatabaseSizeOptions(QueryOptions):
    # exact size instead of an approximation
    exact: Annotated[bool, QueryParam("exact")] = False


class DataModelOptions(QueryOptions):
    reasoning: Annotated[bool, QueryParam("reasoning", omit_empty=True)] = False
    output_format: Annotated[Optional[DataModelFormat], QueryParam("output", omit_empty=True)] = None


class RestoreDatabaseOptions(QueryOptions):
    # overwrite an existing database with this backup
    force: Annotated[bool, QueryParam("force", omit_empty=True)] = False
    # name of the restored database when different from the backup
    name: Annotated[Optional[str], QueryParam("name", omit_empty=True)] = None


class ExportDataOptions(QueryOptions):
    """
    Optional parameters for exporting RDF data.

    ``format`` is not a query parameter: it selects the Accept header, or the
    ``format`` parameter for server-side exports. ``compression`` only applies
    to server-side exports.
    """
    named_graph: Annotated[List[str], QueryParam("named-graph-uri", omit_empty=True)] = Field(default_factory=list)
    format: Optional[RDFFormat] = None
    compression: Annotated[Optional[Compression], QueryParam("compression", omit_empty=True)] = None
    server_side: Annotated[bool, QueryParam("server-side", omit_empty=True)] = False


class ExportObfuscatedDataOptions(ExportDataOptions):
    """
    Export options plus an optional obfuscation configuration (Turtle).

    Without a configuration the server's default obfuscation is used.
    """
    obfuscation_config: Optional[Path] = None
