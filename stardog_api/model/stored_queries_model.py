"""Stored Queries Model Classes"""

from typing import List, Optional

from pydantic import BaseModel, Field


class StoredQuery(BaseModel):
    """A named query stored on the server."""
    name: str
    description: str = ""
    database: str = Field("*", description="Database the query runs against, * for any")
    query: str
    shared: bool = False
    reasoning: bool = False
    creator: Optional[str] = None


class StoredQueriesResponse(BaseModel):
    queries: List[StoredQuery] = Field(default_factory=list)
