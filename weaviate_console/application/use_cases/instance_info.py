from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..dto import InstanceRequest
from ..validation import connection_target
from ...domain.interfaces import WeaviateGateway
from ...domain.models import AggregateCountIntent, ClassDetails, InstanceInfo
from ...infrastructure.config import count_workers
from ...infrastructure.logging import get_logger
from ...infrastructure.weaviate.graphql import build_query
from ...infrastructure.weaviate.normalize import normalize
from .base import GatewayFactory, GatewayUseCase

logger = get_logger("weaviate_console.use_cases.instance_info")


def _class_name(entry: Any) -> Optional[str]:
    """Schema entries are objects with ``class`` (or ``name``); bare strings are accepted too."""
    if isinstance(entry, str):
        return entry.strip() or None
    if isinstance(entry, Mapping):
        name = entry.get("class") or entry.get("name")
        return str(name) if name else None
    return None


def _details(name: str, entry: Any, count: Optional[int]) -> ClassDetails:
    if not isinstance(entry, Mapping):
        return ClassDetails(name=name, count=count)
    props = entry.get("properties")
    return ClassDetails(
        name=name,
        vectorizer=entry.get("vectorizer") or None,
        vector_index_type=entry.get("vectorIndexType") or None,
        properties=[p.get("name") for p in props if isinstance(p, Mapping)] if isinstance(props, list) else None,
        count=count,
    )


class InstanceInfoUseCase(GatewayUseCase):
    """Use-case: instance meta, schema classes and per-class object counts."""

    def __init__(self, gateway_factory: Optional[GatewayFactory] = None, max_workers: Optional[int] = None) -> None:
        super().__init__(gateway_factory)
        self._max_workers = max_workers

    @staticmethod
    def count_for_class(gateway: WeaviateGateway, class_name: str) -> Optional[int]:
        intent = AggregateCountIntent(class_name=class_name)
        data = gateway.graphql(build_query(intent))
        return normalize(data, intent, f"/info {class_name}")

    def _fetch_counts(self, gateway: WeaviateGateway, names: List[str]) -> Tuple[Dict[str, Optional[int]], Dict[str, str]]:
        """
        Fetch every class count concurrently.

        Completion order is arbitrary, so results are keyed by class name. A
        failing count is logged and reported as unknown (None) with its message
        in the returned error map; it never fails the whole operation.
        """
        counts: Dict[str, Optional[int]] = {}
        errors: Dict[str, str] = {}
        if not names:
            return counts, errors
        workers = min(self._max_workers or count_workers(), len(names))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {pool.submit(self.count_for_class, gateway, n): n for n in names}
            for fut in as_completed(futures):
                name = futures[fut]
                try:
                    counts[name] = fut.result()
                except Exception as ex:
                    logger.warning("count error for %s | %s: %s", name, type(ex).__name__, ex)
                    counts[name] = None
                    errors[name] = str(ex) or type(ex).__name__
        return counts, errors

    def execute(self, req: InstanceRequest) -> InstanceInfo:
        target = connection_target(req.base_url, req.api_key)
        gateway = self._gateway_factory(target)

        meta = gateway.meta()
        schema = gateway.schema()
        entries = schema.get("classes") if isinstance(schema, Mapping) else None

        named: List[Tuple[str, Any]] = []
        for entry in entries or []:
            name = _class_name(entry)
            if name:
                named.append((name, entry))
        names = [n for n, _ in named]

        counts, errors = self._fetch_counts(gateway, list(dict.fromkeys(names)))

        details = {name: _details(name, entry, counts.get(name)) for name, entry in named}
        total = sum(c for c in counts.values() if c is not None)

        logger.info("Instance info | classes=%d | total=%s | count_errors=%d", len(names), total, len(errors))
        return InstanceInfo(meta=meta, classes=names, class_details=details, total=total, count_errors=errors)
