from __future__ import annotations

from typing import Callable, Optional

from ...domain.interfaces import WeaviateGateway
from ...domain.models import ConnectionTarget
from ...infrastructure.weaviate.client import WeaviateClient

GatewayFactory = Callable[[ConnectionTarget], WeaviateGateway]


class GatewayUseCase:
    """Shared wiring: each execution opens a gateway for the request's own connection target."""

    def __init__(self, gateway_factory: Optional[GatewayFactory] = None) -> None:
        self._gateway_factory: GatewayFactory = gateway_factory or WeaviateClient
