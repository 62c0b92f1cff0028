"""Server Admin Model Classes

Pydantic models for server processes.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProcessProgress(BaseModel):
    max: int = 0
    current: int = 0
    stage: Optional[str] = None


class Process(BaseModel):
    """A query, transaction or other process running on the server."""
    type: Optional[str] = None
    kernel_id: Optional[str] = Field(None, alias="kernelId")
    id: str
    db: Optional[str] = None
    user: Optional[str] = None
    start_time: Optional[int] = Field(None, alias="startTime", description="Start time in epoch milliseconds")
    status: Optional[str] = None
    progress: ProcessProgress = Field(default_factory=ProcessProgress)

    model_config = {"populate_by_name": True}
