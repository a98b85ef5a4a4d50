from __future__ import annotations

from typing import Any

from ..dto import ObjectRequest
from ..validation import connection_target, require
from .base import GatewayUseCase


class GetObjectUseCase(GatewayUseCase):
    """Use-case: full object detail, including the vector when available."""

    def execute(self, req: ObjectRequest) -> Any:
        target = connection_target(req.base_url, req.api_key)
        object_id = str(require(req.object_id, "object id")).strip()
        return self._gateway_factory(target).get_object(object_id)


class DeleteObjectUseCase(GatewayUseCase):
    """Use-case: delete one object by id."""

    def execute(self, req: ObjectRequest) -> None:
        target = connection_target(req.base_url, req.api_key)
        object_id = str(require(req.object_id, "object id")).strip()
        self._gateway_factory(target).delete_object(object_id)
