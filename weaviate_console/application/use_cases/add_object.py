from __future__ import annotations

from typing import Any

from ..dto import AddObjectRequest
from ..validation import connection_target, require, require_class_name
from .base import GatewayUseCase


class AddObjectUseCase(GatewayUseCase):
    """Use-case: store a query/content pair as a new object; Weaviate vectorizes it."""

    def execute(self, req: AddObjectRequest) -> Any:
        target = connection_target(req.base_url, req.api_key)
        class_name = require_class_name(req.class_name)
        query = require(req.query, "query")
        content = require(req.content, "content")
        return self._gateway_factory(target).create_object(class_name, {"query": query, "content": content})
