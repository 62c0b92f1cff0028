"""
Stardog Client Request Options

Per-request header options and multipart form bodies.
"""

from dataclasses import dataclass, field
from typing import Dict, IO, List, Optional, Tuple, Union

FileContent = Union[bytes, IO[bytes]]


@dataclass(frozen=True)
class RequestHeaderOptions:
    """Content-Type and Accept headers for a single request."""
    content_type: Optional[str] = None
    accept: Optional[str] = None


@dataclass
class MultipartForm:
    """
    Body of a multipart/form-data request.

    ``fields`` are sent as plain form fields, ``files`` as
    ``(field name, filename, content)`` file parts.
    """
    fields: Dict[str, str] = field(default_factory=dict)
    files: List[Tuple[str, str, FileContent]] = field(default_factory=list)
