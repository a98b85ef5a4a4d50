from __future__ import annotations

from typing import Any, Dict, List

from ..dto import SearchObjectsRequest
from ..validation import connection_target, require, require_class_name
from ...domain.errors import ValidationError
from ...domain.models import HybridSearchIntent, QueryIntent, SemanticSearchIntent
from ...infrastructure.weaviate.graphql import SEARCH_MODES, build_query
from ...infrastructure.weaviate.normalize import normalize
from .base import GatewayUseCase


def search_intent(req: SearchObjectsRequest) -> QueryIntent:
    """
    Translate a search request into a hybrid or nearText intent.

    A missing ``search_type`` means hybrid. Hybrid hits carry ``score``;
    nearText hits carry ``certainty`` and no ``query`` field.

    Raises:
        ValidationError: Missing class/query or an unknown search type.
    """
    class_name = require_class_name(req.class_name)
    query = require(req.query, "query")
    mode = req.search_type or "hybrid"
    if mode not in SEARCH_MODES:
        raise ValidationError(f"Unknown search type: {mode}")
    if mode == "hybrid":
        return HybridSearchIntent(
            class_name=class_name,
            query_text=query,
            properties=tuple(req.properties) if req.properties else None,
            alpha=req.alpha,
            limit=req.limit,
        )
    return SemanticSearchIntent(
        class_name=class_name,
        query_text=query,
        certainty=req.certainty,
        limit=req.limit,
    )


class SearchObjectsUseCase(GatewayUseCase):
    """Use-case: hybrid or semantic search within one class."""

    def execute(self, req: SearchObjectsRequest) -> List[Dict[str, Any]]:
        target = connection_target(req.base_url, req.api_key)
        intent = search_intent(req)
        data = self._gateway_factory(target).graphql(build_query(intent))
        return normalize(data, intent, "/search")
