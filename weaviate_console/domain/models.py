from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union


@dataclass(frozen=True)
class ConnectionTarget:
    """Where and how to reach a Weaviate instance for one request.

    Fields:
        base_url: Scheme + host (+ optional port/prefix), without trailing slash.
        api_key: Bearer token; empty string means anonymous.
    """
    base_url: str
    api_key: str = ""


@dataclass(frozen=True)
class ListIntent:
    class_name: str
    limit: Optional[int] = None


@dataclass(frozen=True)
class HybridSearchIntent:
    class_name: str
    query_text: str
    properties: Optional[Sequence[str]] = None
    alpha: Optional[Any] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class SemanticSearchIntent:
    class_name: str
    query_text: str
    certainty: Optional[Any] = None
    limit: Optional[int] = None


@dataclass(frozen=True)
class SchemaIntrospectionIntent:
    pass


@dataclass(frozen=True)
class AggregateCountIntent:
    class_name: str


QueryIntent = Union[
    ListIntent,
    HybridSearchIntent,
    SemanticSearchIntent,
    SchemaIntrospectionIntent,
    AggregateCountIntent,
]


@dataclass(frozen=True)
class RemoteResponse:
    """Outcome of one HTTP call against Weaviate.

    Fields:
        status_code: HTTP status.
        raw_body: Body text as received.
        parsed: Decoded JSON, or None when the body was not decoded.
    """
    status_code: int
    raw_body: str
    parsed: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class ClassDetails:
    """Per-class summary shown on the instance info panel."""
    name: str
    vectorizer: Optional[str] = None
    vector_index_type: Optional[str] = None
    properties: Optional[List[str]] = None
    count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "vectorizer": self.vectorizer,
            "vectorIndexType": self.vector_index_type,
            "properties": self.properties,
            "count": self.count,
        }


@dataclass(frozen=True)
class InstanceInfo:
    """Instance metadata, class names and per-class counts.

    Fields:
        meta: Raw ``/v1/meta`` payload.
        classes: Class names in schema order.
        class_details: Details keyed by class name.
        total: Sum of the counts that could be determined.
        count_errors: Failure message keyed by class name, for counts that could not be fetched.
    """
    meta: Any
    classes: List[str]
    class_details: Dict[str, ClassDetails]
    total: int = 0
    count_errors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "meta": self.meta,
            "classes": list(self.classes),
            "classDetails": {name: d.to_dict() for name, d in self.class_details.items()},
            "total": self.total,
            "countErrors": dict(self.count_errors),
        }
