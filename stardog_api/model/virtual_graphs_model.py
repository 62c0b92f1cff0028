"""Virtual Graphs Model Classes"""

from typing import List, Optional

from pydantic import BaseModel, Field


class VirtualGraph(BaseModel):
    """A virtual graph mapping a data source into a database."""
    name: str
    data_source: Optional[str] = None
    database: Optional[str] = None
    available: bool = False


class VirtualGraphNamesResponse(BaseModel):
    virtual_graphs: List[str] = Field(default_factory=list)


class VirtualGraphsListResponse(BaseModel):
    virtual_graphs: List[VirtualGraph] = Field(default_factory=list)
