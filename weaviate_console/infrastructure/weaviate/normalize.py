from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional, Union

from ...domain.models import (
    AggregateCountIntent,
    HybridSearchIntent,
    ListIntent,
    QueryIntent,
    SchemaIntrospectionIntent,
    SemanticSearchIntent,
)
from ..logging import get_logger
from .graphql import OBJECTS_TYPE_NAME

logger = get_logger("weaviate_console.weaviate.normalize")

NormalizedResult = Union[List[Dict[str, Any]], Optional[List[str]], Optional[int]]


def _lookup(node: Any, *keys: Any) -> Any:
    """Walk mappings (str keys) and lists (int keys); None as soon as a level is absent."""
    for key in keys:
        if isinstance(key, int):
            if not isinstance(node, list) or not -len(node) <= key < len(node):
                return None
            node = node[key]
        else:
            if not isinstance(node, Mapping):
                return None
            node = node.get(key)
        if node is None:
            return None
    return node


def graphql_errors(payload: Any, endpoint: str) -> bool:
    """Log a non-empty GraphQL ``errors`` array; returns True when one is present.

    Weaviate can return partial ``data`` next to ``errors``, so this never raises.
    """
    errors = _lookup(payload, "errors")
    if isinstance(errors, list) and errors:
        logger.warning("weaviate graphql %s errors | %s", endpoint, errors)
        return True
    return False


def flatten_record(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``_additional`` (id, score, certainty, ...) into the record's top level."""
    out = {k: v for k, v in record.items() if k != "_additional"}
    additional = record.get("_additional")
    if isinstance(additional, Mapping):
        out.update(additional)
    return out


def extract_objects(payload: Any, class_name: str) -> List[Dict[str, Any]]:
    """Records under ``data.Get.<class_name>``; an absent path means no results."""
    records = _lookup(payload, "data", "Get", class_name)
    if not isinstance(records, list):
        return []
    return [flatten_record(r) for r in records if isinstance(r, Mapping)]


def extract_class_names(payload: Any) -> Optional[List[str]]:
    """Field names of the ``GetObjectsObj`` introspection type, or None when it is absent."""
    types = _lookup(payload, "data", "__schema", "types")
    if not isinstance(types, list):
        return None
    for t in types:
        if isinstance(t, Mapping) and t.get("name") == OBJECTS_TYPE_NAME:
            fields = t.get("fields")
            if not isinstance(fields, list):
                return None
            return [f.get("name") for f in fields if isinstance(f, Mapping)]
    return None


def extract_aggregate_count(payload: Any, class_name: str) -> Optional[int]:
    """
    Object count from ``data.Aggregate.<class_name>[0].meta.count``.

    Only numeric values are accepted and are returned as int. Anything else is
    reported as unknown (None), which is different from a confirmed count of 0.
    """
    count = _lookup(payload, "data", "Aggregate", class_name, 0, "meta", "count")
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        return None
    if isinstance(count, float) and not math.isfinite(count):
        return None
    return int(count)


def normalize(payload: Any, intent: QueryIntent, endpoint: str = "graphql") -> NormalizedResult:
    """Project a GraphQL response onto the result shape of ``intent``."""
    graphql_errors(payload, endpoint)
    if isinstance(intent, (ListIntent, HybridSearchIntent, SemanticSearchIntent)):
        return extract_objects(payload, intent.class_name)
    if isinstance(intent, SchemaIntrospectionIntent):
        return extract_class_names(payload)
    if isinstance(intent, AggregateCountIntent):
        return extract_aggregate_count(payload, intent.class_name)
    raise TypeError(f"Unsupported query intent: {type(intent).__name__}")
