from __future__ import annotations

import json
from typing import Any, Optional, Sequence

import uvicorn

from ..application.dto import (
    AddObjectRequest,
    InstanceRequest,
    ListObjectsRequest,
    ObjectRequest,
    SearchObjectsRequest,
)
from ..application.use_cases.add_object import AddObjectUseCase
from ..application.use_cases.instance_info import InstanceInfoUseCase
from ..application.use_cases.list_classes import ListClassesUseCase
from ..application.use_cases.list_objects import ListObjectsUseCase
from ..application.use_cases.object_detail import DeleteObjectUseCase, GetObjectUseCase
from ..application.use_cases.search_objects import SearchObjectsUseCase
from ..domain.errors import ValidationError
from ..infrastructure.config import server_host, server_port, weaviate_api_key, weaviate_url
from ..infrastructure.logging import get_logger
from ..web.app import create_app
from .parsers import build_parser

logger = get_logger("weaviate_console.cli")


def _connection(ns) -> tuple:
    """Resolve base URL and API key from explicit flags, falling back to env/.env."""
    base = getattr(ns, "base_url", None) or weaviate_url()
    api_key = getattr(ns, "api_key", None)
    if api_key is None:
        api_key = weaviate_api_key()
    return base, api_key


def _ok(result: Any) -> int:
    print(json.dumps({"status": "ok", "result": result}, indent=2))
    return 0


def serve(ns) -> int:
    host = getattr(ns, "host", None) or server_host()
    port = getattr(ns, "port", None) or server_port()
    base = getattr(ns, "base_url", None) or weaviate_url()
    logger.info("Serving console | http://%s:%d | default base=%s", host, port, base or "-")
    uvicorn.run(create_app(default_base_url=base), host=host, port=port)
    return 0


def list_objects(ns, gateway_factory=None) -> int:
    base, api_key = _connection(ns)
    result = ListObjectsUseCase(gateway_factory).execute(
        ListObjectsRequest(base_url=base, class_name=ns.class_name, api_key=api_key, limit=ns.limit)
    )
    return _ok(result)


def search_objects(ns, gateway_factory=None) -> int:
    base, api_key = _connection(ns)
    result = SearchObjectsUseCase(gateway_factory).execute(
        SearchObjectsRequest(
            base_url=base,
            class_name=ns.class_name,
            query=ns.q,
            api_key=api_key,
            search_type=ns.type,
            alpha=ns.alpha,
            certainty=ns.certainty,
            properties=list(ns.property or []) or None,
            limit=ns.limit,
        )
    )
    return _ok(result)


def add_object(ns, gateway_factory=None) -> int:
    base, api_key = _connection(ns)
    result = AddObjectUseCase(gateway_factory).execute(
        AddObjectRequest(base_url=base, class_name=ns.class_name, query=ns.query, content=ns.content, api_key=api_key)
    )
    return _ok(result)


def delete_object(ns, gateway_factory=None) -> int:
    base, api_key = _connection(ns)
    DeleteObjectUseCase(gateway_factory).execute(ObjectRequest(base_url=base, object_id=ns.id, api_key=api_key))
    return _ok({"deleted": ns.id})


def get_object(ns, gateway_factory=None) -> int:
    base, api_key = _connection(ns)
    return _ok(GetObjectUseCase(gateway_factory).execute(ObjectRequest(base_url=base, object_id=ns.id, api_key=api_key)))


def list_classes(ns, gateway_factory=None) -> int:
    base, api_key = _connection(ns)
    return _ok(ListClassesUseCase(gateway_factory).execute(InstanceRequest(base_url=base, api_key=api_key)))


def instance_info(ns, gateway_factory=None) -> int:
    base, api_key = _connection(ns)
    info = InstanceInfoUseCase(gateway_factory).execute(InstanceRequest(base_url=base, api_key=api_key))
    return _ok(info.to_dict())


_COMMANDS = {
    "list": list_objects,
    "search": search_objects,
    "add": add_object,
    "delete": delete_object,
    "object": get_object,
    "classes": list_classes,
    "info": instance_info,
}


def dispatch_commands(ns, gateway_factory=None) -> int:
    """
    Dispatches CLI commands to the matching console use case.

    Commands:
    - serve: run the page and JSON routes under uvicorn (default when no command is given)
    - list, search, add, delete, object, classes, info: one call against the instance, printed as JSON
    """
    if ns.cmd in (None, "serve"):
        return serve(ns)
    handler = _COMMANDS.get(ns.cmd)
    if handler is None:
        print(json.dumps({"status": "error", "error": f"Unknown command: {ns.cmd}"}))
        return 2
    return handler(ns, gateway_factory)


def run(argv: Optional[Sequence[str]] = None, gateway_factory=None) -> int:
    ap = build_parser()
    ns = ap.parse_args(list(argv or []))

    try:
        return dispatch_commands(ns, gateway_factory)
    except ValidationError as ex:
        print(json.dumps({"status": "error", "error": f"{type(ex).__name__}: {ex}"}))
        return 2
    except Exception as ex:  # keep CLI concise and user-friendly
        print(json.dumps({"status": "error", "error": f"{type(ex).__name__}: {ex}"}))
        return 3


def main() -> int:
    import sys
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
