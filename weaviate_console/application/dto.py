from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

# Every request carries its own connection details (base_url/api_key); the
# use cases validate presence, nothing is defaulted here.


@dataclass(frozen=True)
class ListObjectsRequest:
    base_url: Optional[str]
    class_name: Optional[str]
    api_key: str = ""
    limit: Optional[int] = None


@dataclass(frozen=True)
class SearchObjectsRequest:
    base_url: Optional[str]
    class_name: Optional[str]
    query: Optional[str]
    api_key: str = ""
    search_type: Optional[str] = None
    alpha: Optional[Any] = None
    certainty: Optional[Any] = None
    properties: Optional[List[str]] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class AddObjectRequest:
    base_url: Optional[str]
    class_name: Optional[str]
    query: Optional[str]
    content: Optional[str]
    api_key: str = ""


@dataclass(frozen=True)
class ObjectRequest:
    """Addresses a single object by id (detail and delete)."""
    base_url: Optional[str]
    object_id: Optional[str]
    api_key: str = ""


@dataclass(frozen=True)
class InstanceRequest:
    """Instance-wide operations (classes, info) need only the connection."""
    base_url: Optional[str]
    api_key: str = ""
