"""Data Sources Model Classes

Pydantic models for data source management operations.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..client.utils.query_options import QueryOptions, QueryParam


class DataSource(BaseModel):
    """A data source registered with the server."""
    name: str = Field(..., alias="entityName", description="Data source name")
    shareable: bool = Field(False, alias="sharable", description="Whether virtual graphs may share it")
    available: bool = Field(False, description="Whether the data source is reachable")

    model_config = {"populate_by_name": True}


class DataSourceNamesResponse(BaseModel):
    data_sources: List[str] = Field(default_factory=list)


class DataSourcesListResponse(BaseModel):
    data_sources: List[DataSource] = Field(default_factory=list)


class DataSourceOptionsResponse(BaseModel):
    options: Dict[str, Any] = Field(default_factory=dict)


class AddDataSourceRequest(BaseModel):
    name: str
    options: Dict[str, Any] = Field(default_factory=dict)


class UpdateDataSourceRequest(BaseModel):
    options: Dict[str, Any] = Field(default_factory=dict)


class RefreshDataSourceOptions(BaseModel):
    """Restrict a metadata or count refresh to a single table."""
    table: Optional[str] = Field(None, serialization_alias="name")


class DeleteDataSourceOptions(QueryOptions):
    # also remove the virtual graphs that use the data source
    force: Annotated[bool, QueryParam("force", omit_empty=True)] = False
