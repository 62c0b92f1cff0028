"""
Stardog Database Admin Endpoint

Client endpoint for database administration: creation and removal, metadata
(configuration options), namespaces, maintenance and data export.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlencode

import aiofiles

from .base_endpoint import (
    BaseEndpoint, JSON_ACCEPT, JSON_CONTENT_AND_ACCEPT, TEXT_ACCEPT, path_segment
)
from ..request_context import RequestContext
from ..request_options import MultipartForm, RequestHeaderOptions
from ..response.client_response import Response
from ..utils.client_utils import StardogConfigurationError, StardogDecodeError
from ..utils.query_options import add_options
from ...model.database_model import (
    CreateDatabaseFile, CreateDatabaseOptions, CreateDatabaseRequest, CreateDatabaseResponse,
    DatabaseNamesResponse, DatabaseOptionDetails, DatabaseSizeOptions, DatabasesWithMetadataResponse,
    DataModelOptions, ExportDataOptions, ExportObfuscatedDataOptions, ImportNamespacesResponse,
    Namespace, NamespacesResponse, RestoreDatabaseOptions
)
from ...model.formats_model import MediaType, RDFFormat

logger = logging.getLogger(__name__)


async def _read_regular_file(path: Union[str, Path], what: str) -> bytes:
    file_path = Path(path)
    if file_path.is_dir():
        raise StardogConfigurationError(f"the {what} can't be a directory: {file_path}")
    async with aiofiles.open(file_path, 'rb') as f:
        return await f.read()


class DatabaseAdminEndpoint(BaseEndpoint):
    """Client endpoint for database administration."""

    async def metadata(self, ctx: Optional[RequestContext], database: str,
                       options: List[str]) -> Dict[str, Any]:
        """
        Get the value of specific metadata options for a database.

        Args:
            ctx: Request context
            database: Database name
            options: Option names, e.g. ``["search.enabled", "database.online"]``

        Returns:
            Mapping of option name to its current value
        """
        self._validate(database=database)
        body = {option: "" for option in options}
        data = await self._request_typed(ctx, "PUT", f"admin/databases/{path_segment(database)}/options",
                                         Dict[str, Any], header_options=JSON_CONTENT_AND_ACCEPT, body=body)
        return data or {}

    async def set_metadata(self, ctx: Optional[RequestContext], database: str,
                           options: Dict[str, Any]) -> Response:
        """Set the value of specific metadata options for a database."""
        self._validate(database=database)
        return await self._request(ctx, "POST", f"admin/databases/{path_segment(database)}/options",
                                   header_options=JSON_CONTENT_AND_ACCEPT, body=options)

    async def all_metadata(self, ctx: Optional[RequestContext], database: str) -> Dict[str, Any]:
        """Get the value of every metadata option for a database."""
        self._validate(database=database)
        data = await self._request_typed(ctx, "GET", f"admin/databases/{path_segment(database)}/options",
                                         Dict[str, Any])
        return data or {}

    async def list_with_metadata(self, ctx: Optional[RequestContext]) -> List[Dict[str, Any]]:
        """List all databases together with their metadata options."""
        data = await self._request_typed(ctx, "GET", "admin/databases/options", DatabasesWithMetadataResponse)
        return data.databases if data else []

    async def list_databases(self, ctx: Optional[RequestContext]) -> List[str]:
        data = await self._request_typed(ctx, "GET", "admin/databases", DatabaseNamesResponse)
        return data.databases if data else []

    async def namespaces(self, ctx: Optional[RequestContext], database: str) -> List[Namespace]:
        """Get the namespaces (prefix declarations) stored for a database."""
        self._validate(database=database)
        data = await self._request_typed(ctx, "GET", f"{path_segment(database)}/namespaces", NamespacesResponse)
        return data.namespaces if data else []

    async def import_namespaces(self, ctx: Optional[RequestContext], database: str,
                                path: Union[str, Path]) -> Optional[ImportNamespacesResponse]:
        """
        Import the namespaces declared in an RDF file into a database.

        The RDF format, and so the Content-Type, is taken from the file extension.

        Raises:
            StardogConfigurationError: If the path is a directory or the extension is not an RDF format
            OSError: If the file cannot be read
        """
        self._validate(database=database, path=path)
        rdf_format = RDFFormat.from_extension(path)
        content = await _read_regular_file(path, "file containing the namespaces")
        header_options = RequestHeaderOptions(content_type=rdf_format.value, accept=MediaType.APPLICATION_JSON)
        return await self._request_typed(ctx, "POST", f"{path_segment(database)}/namespaces",
                                         ImportNamespacesResponse, header_options=header_options, content=content)

    async def size(self, ctx: Optional[RequestContext], database: str,
                   options: Optional[DatabaseSizeOptions] = None) -> int:
        """
        Get the size of a database in triples.

        The size is approximate unless ``DatabaseSizeOptions.exact`` is set.
        """
        self._validate(database=database)
        path = add_options(f"{path_segment(database)}/size", options)
        text = await self._request_text(ctx, "GET", path, header_options=TEXT_ACCEPT)
        try:
            return int(text.strip())
        except ValueError as e:
            raise StardogDecodeError(f"database size is not an integer: {text!r}") from e

    async def metadata_documentation(self, ctx: Optional[RequestContext]) -> Dict[str, DatabaseOptionDetails]:
        """Describe every database configuration option: type, category, default value, ..."""
        data = await self._request_typed(ctx, "GET", "admin/config_properties", Dict[str, DatabaseOptionDetails])
        return data or {}

    async def create(self, ctx: Optional[RequestContext], name: str,
                     options: Optional[CreateDatabaseOptions] = None) -> Optional[str]:
        """
        Create a database, optionally bulk loading datasets.

        With ``copy_to_server`` the dataset files are read locally and uploaded
        as file parts; otherwise the paths must exist on the server.

        Returns:
            The server's confirmation message
        """
        self._validate(name=name)
        options = options or CreateDatabaseOptions()
        descriptor = CreateDatabaseRequest(
            name=name,
            options=options.database_options,
            files=[CreateDatabaseFile(filename=str(dataset.path), context=dataset.named_graph)
                   for dataset in options.datasets],
            copy_to_server=options.copy_to_server,
        )
        form = MultipartForm(fields={
            "root": json.dumps(descriptor.model_dump(mode="json", by_alias=True, exclude_none=True),
                               ensure_ascii=False)
        })
        if options.copy_to_server:
            for dataset in options.datasets:
                filename = Path(dataset.path).name
                form.files.append((filename, filename, await _read_regular_file(dataset.path, "dataset")))

        header_options = RequestHeaderOptions(content_type=MediaType.MULTIPART_FORM_DATA,
                                              accept=MediaType.APPLICATION_JSON)
        request = self.client.new_multipart_request("POST", "admin/databases", header_options, form)
        logger.info(f"Creating database {name} with {len(options.datasets)} dataset(s)")
        response = await self.client.do(ctx, request, CreateDatabaseResponse)
        return response.data.message if response.data else None

    async def drop(self, ctx: Optional[RequestContext], database: str) -> Response:
        self._validate(database=database)
        logger.info(f"Dropping database {database}")
        return await self._request(ctx, "DELETE", f"admin/databases/{path_segment(database)}",
                                   header_options=JSON_ACCEPT)

    async def optimize(self, ctx: Optional[RequestContext], database: str) -> Response:
        self._validate(database=database)
        return await self._request(ctx, "PUT", f"admin/databases/{path_segment(database)}/optimize",
                                   header_options=JSON_ACCEPT)

    async def repair(self, ctx: Optional[RequestContext], database: str) -> Response:
        """Attempt to recover a corrupted database. The database must be offline."""
        self._validate(database=database)
        return await self._request(ctx, "POST", f"admin/databases/{path_segment(database)}/repair",
                                   header_options=JSON_ACCEPT)

    async def restore(self, ctx: Optional[RequestContext], path: str,
                      options: Optional[RestoreDatabaseOptions] = None) -> Response:
        """
        Restore a database from a backup directory on the server.

        Args:
            ctx: Request context
            path: Backup location on the server
            options: Overwrite an existing database or restore under another name
        """
        self._validate(path=path)
        url = add_options(f"admin/restore?{urlencode({'from': path})}", options)
        return await self._request(ctx, "PUT", url, header_options=JSON_ACCEPT)

    async def online(self, ctx: Optional[RequestContext], database: str) -> Response:
        self._validate(database=database)
        return await self._request(ctx, "PUT", f"admin/databases/{path_segment(database)}/online",
                                   header_options=JSON_ACCEPT)

    async def offline(self, ctx: Optional[RequestContext], database: str) -> Response:
        self._validate(database=database)
        return await self._request(ctx, "PUT", f"admin/databases/{path_segment(database)}/offline",
                                   header_options=JSON_ACCEPT)

    async def data_model(self, ctx: Optional[RequestContext], database: str,
                         options: Optional[DataModelOptions] = None) -> str:
        """Generate the reasoning data model of a database in the requested output format."""
        self._validate(database=database)
        path = add_options(f"{path_segment(database)}/model", options)
        return await self._request_text(ctx, "GET", path, header_options=None)

    @staticmethod
    def _export_negotiation(path: str, options: Optional[ExportDataOptions]):
        header_options = RequestHeaderOptions()
        if options is not None and options.format is not None:
            if not options.server_side:
                header_options = RequestHeaderOptions(accept=options.format.value)
            else:
                # the server writes the file itself and reports the export in plain text
                separator = "&" if "?" in path else "?"
                path = f"{path}{separator}format={options.format.export_format}"
                header_options = RequestHeaderOptions(accept=MediaType.PLAIN_TEXT)
        return path, header_options

    async def export_data(self, ctx: Optional[RequestContext], database: str,
                          options: Optional[ExportDataOptions] = None) -> bytes:
        """
        Export the RDF data of a database.

        For a server-side export the data is saved to the server's export
        directory and the returned bytes are the server's plain-text report,
        e.g. ``Exported 28 statements from db1 to ...``.
        """
        self._validate(database=database)
        path, header_options = self._export_negotiation(f"{path_segment(database)}/export", options)
        path = add_options(path, options)
        return await self._request_bytes(ctx, "GET", path, header_options=header_options)

    async def export_obfuscated_data(self, ctx: Optional[RequestContext], database: str,
                                     options: Optional[ExportObfuscatedDataOptions] = None) -> bytes:
        """
        Export obfuscated RDF data from a database.

        Without ``obfuscation_config`` the server's default obfuscation is
        applied (``obf=DEFAULT``); with one, its Turtle content is posted.
        """
        self._validate(database=database)
        path = f"{path_segment(database)}/export"
        method = "GET"
        content = None
        if options is not None and options.obfuscation_config is not None:
            method = "POST"
            content = await _read_regular_file(options.obfuscation_config, "obfuscation configuration file")
        else:
            path += "?obf=DEFAULT"

        path, header_options = self._export_negotiation(path, options)
        if content:
            header_options = RequestHeaderOptions(content_type=RDFFormat.TURTLE.value,
                                                  accept=header_options.accept)
        else:
            content = None
        path = add_options(path, options)
        return await self._request_bytes(ctx, method, path, header_options=header_options, content=content)
