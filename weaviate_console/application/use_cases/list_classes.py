from __future__ import annotations

from typing import List, Optional

from ..dto import InstanceRequest
from ..validation import connection_target
from ...domain.models import SchemaIntrospectionIntent
from ...infrastructure.weaviate.graphql import build_query
from ...infrastructure.weaviate.normalize import normalize
from .base import GatewayUseCase


class ListClassesUseCase(GatewayUseCase):
    """Use-case: queryable class names via GraphQL introspection (None when undeterminable)."""

    def execute(self, req: InstanceRequest) -> Optional[List[str]]:
        target = connection_target(req.base_url, req.api_key)
        intent = SchemaIntrospectionIntent()
        data = self._gateway_factory(target).graphql(build_query(intent))
        return normalize(data, intent, "/classes")
