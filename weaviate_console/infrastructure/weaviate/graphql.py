"""
GraphQL document builders for the Weaviate ``Get``, ``Aggregate`` and
``__schema`` surfaces.

Documents are produced as text. Free-text values are escaped with
``escape_graphql`` before interpolation; class names and numeric parameters
are interpolated as given, so callers must pass trusted identifiers (the use
cases validate class names before they get here).
"""
from __future__ import annotations

import json
from typing import Any, Optional, Sequence

from ...domain.errors import ValidationError
from ...domain.models import (
    AggregateCountIntent,
    HybridSearchIntent,
    ListIntent,
    QueryIntent,
    SchemaIntrospectionIntent,
    SemanticSearchIntent,
)

DEFAULT_LIST_LIMIT = 20
DEFAULT_SEARCH_LIMIT = 5
DEFAULT_ALPHA = 0.5
DEFAULT_NEARTEXT_CERTAINTY = 0.5
DEFAULT_SEARCH_PROPERTIES = ("query", "content")
SEARCH_MODES = ("hybrid", "nearText")

# The introspection type whose fields are the queryable classes under Get.
OBJECTS_TYPE_NAME = "GetObjectsObj"

_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
)


def escape_graphql(value: Any) -> Any:
    """Escape a value for use inside a double-quoted GraphQL string literal.

    Backslashes are doubled first, then quotes, newlines and carriage returns
    are replaced by their escape sequences. Non-string values are returned
    unchanged.
    """
    if not isinstance(value, str):
        return value
    for raw, escaped in _ESCAPES:
        value = value.replace(raw, escaped)
    return value


def unescape_graphql(value: Any) -> Any:
    """Inverse of ``escape_graphql`` for the four sequences it produces."""
    if not isinstance(value, str):
        return value
    out = []
    i = 0
    mapping = {"\\": "\\", '"': '"', "n": "\n", "r": "\r"}
    while i < len(value):
        ch = value[i]
        if ch == "\\" and i + 1 < len(value) and value[i + 1] in mapping:
            out.append(mapping[value[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def build_list_query(class_name: str, limit: int = DEFAULT_LIST_LIMIT) -> str:
    """Newest-first listing of ``class_name`` objects with their query/content fields."""
    return f"""{{
    Get {{
      {class_name}(
        limit: {limit}
        sort: [{{ path: ["_creationTimeUnix"], order: desc }}]
      ) {{
        query
        content
        _additional {{ id }}
      }}
    }}
  }}"""


def build_search_query(
    class_name: str,
    query_text: str,
    mode: str = "hybrid",
    limit: Optional[int] = None,
    alpha: Optional[Any] = None,
    properties: Optional[Sequence[str]] = None,
    certainty: Optional[Any] = None,
) -> str:
    """
    Build a hybrid or nearText search document.

    ``alpha`` and ``certainty`` are forwarded as given; Weaviate rejects values
    it cannot use. nearText results do not request the ``query`` field.

    Args:
        class_name: Class to search.
        query_text: Free-text query; escaped before interpolation.
        mode: ``"hybrid"`` or ``"nearText"``.
        limit: Maximum hits, defaults to 5.
        alpha: Hybrid blend factor, defaults to 0.5.
        properties: Hybrid keyword properties, defaults to query/content.
        certainty: nearText minimum certainty, defaults to 0.5.

    Raises:
        ValidationError: When ``mode`` is not a known search mode.
    """
    if mode not in SEARCH_MODES:
        raise ValidationError(f"Unknown search type: {mode}")
    limit = DEFAULT_SEARCH_LIMIT if limit is None else limit
    escaped = escape_graphql(query_text)

    if mode == "hybrid":
        alpha = DEFAULT_ALPHA if alpha is None else alpha
        props = list(DEFAULT_SEARCH_PROPERTIES if properties is None else properties)
        return f"""{{
      Get {{
        {class_name}(
          hybrid: {{
            query: "{escaped}"
            properties: {json.dumps(props)}
            alpha: {alpha}
          }}
          limit: {limit}
        ) {{
          query
          content
          _additional {{ id score }}
        }}
      }}
    }}"""

    certainty = DEFAULT_NEARTEXT_CERTAINTY if certainty is None else certainty
    return f"""{{
      Get {{
        {class_name}(
          nearText: {{ concepts: ["{escaped}"], certainty: {certainty} }}
          limit: {limit}
        ) {{
          content
          _additional {{ id certainty }}
        }}
      }}
    }}"""


def build_classes_query() -> str:
    return """{
    __schema {
      types {
        name
        fields {
          name
        }
      }
    }
  }"""


def build_aggregate_query(class_name: str) -> str:
    return f"""{{
    Aggregate {{
      {class_name} {{
        meta {{ count }}
      }}
    }}
  }}"""


def build_query(intent: QueryIntent) -> str:
    """Render the GraphQL document for a query intent."""
    if isinstance(intent, ListIntent):
        limit = DEFAULT_LIST_LIMIT if intent.limit is None else intent.limit
        return build_list_query(intent.class_name, limit)
    if isinstance(intent, HybridSearchIntent):
        return build_search_query(
            intent.class_name,
            intent.query_text,
            "hybrid",
            limit=intent.limit,
            alpha=intent.alpha,
            properties=intent.properties,
        )
    if isinstance(intent, SemanticSearchIntent):
        return build_search_query(
            intent.class_name,
            intent.query_text,
            "nearText",
            limit=intent.limit,
            certainty=intent.certainty,
        )
    if isinstance(intent, SchemaIntrospectionIntent):
        return build_classes_query()
    if isinstance(intent, AggregateCountIntent):
        return build_aggregate_query(intent.class_name)
    raise TypeError(f"Unsupported query intent: {type(intent).__name__}")
