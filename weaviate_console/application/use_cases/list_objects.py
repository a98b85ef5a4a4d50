from __future__ import annotations

from typing import Any, Dict, List

from ..dto import ListObjectsRequest
from ..validation import connection_target, require_class_name
from ...domain.models import ListIntent
from ...infrastructure.weaviate.graphql import build_query
from ...infrastructure.weaviate.normalize import normalize
from .base import GatewayUseCase


class ListObjectsUseCase(GatewayUseCase):
    """Use-case: newest objects of a class."""

    def execute(self, req: ListObjectsRequest) -> List[Dict[str, Any]]:
        target = connection_target(req.base_url, req.api_key)
        intent = ListIntent(class_name=require_class_name(req.class_name), limit=req.limit)
        data = self._gateway_factory(target).graphql(build_query(intent))
        return normalize(data, intent, "/list")
