"""
HTTP surface of the console: the page at ``/`` and one JSON route per admin
operation. Run with ``weaviate-console serve`` or
``uvicorn weaviate_console.web.app:app``.

Every POST body carries its own ``base``/``apiKey``; nothing about the target
instance is kept between requests.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import requests
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ..application.dto import (
    AddObjectRequest,
    InstanceRequest,
    ListObjectsRequest,
    ObjectRequest,
    SearchObjectsRequest,
)
from ..application.use_cases.add_object import AddObjectUseCase
from ..application.use_cases.base import GatewayFactory
from ..application.use_cases.instance_info import InstanceInfoUseCase
from ..application.use_cases.list_classes import ListClassesUseCase
from ..application.use_cases.list_objects import ListObjectsUseCase
from ..application.use_cases.object_detail import DeleteObjectUseCase, GetObjectUseCase
from ..application.use_cases.search_objects import SearchObjectsUseCase
from ..domain.errors import RemoteError, ValidationError
from ..infrastructure.config import weaviate_url
from ..infrastructure.logging import get_logger

logger = get_logger("weaviate_console.web")

_PAGE_PATH = Path(__file__).resolve().parent / "static" / "index.html"
_BASE_URL_PLACEHOLDER = "__DEFAULT_BASE_URL__"


class ConnectionBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base: Optional[str] = None
    api_key: str = Field("", alias="apiKey")


class ListBody(ConnectionBody):
    class_name: Optional[str] = Field(None, alias="class")
    limit: Optional[int] = None


class SearchBody(ConnectionBody):
    class_name: Optional[str] = Field(None, alias="class")
    query: Optional[str] = None
    type: Optional[str] = None
    alpha: Optional[Any] = None
    certainty: Optional[Any] = None
    properties: Optional[List[str]] = None
    limit: Optional[int] = None


class AddBody(ConnectionBody):
    class_name: Optional[str] = Field(None, alias="class")
    query: Optional[str] = None
    content: Optional[str] = None


class ObjectBody(ConnectionBody):
    id: Optional[str] = None


def render_page(default_base_url: str = "") -> str:
    """Console page with the default base URL embedded as a JS string literal."""
    page = _PAGE_PATH.read_text(encoding="utf-8")
    literal = json.dumps(default_base_url).replace("<", "\\u003c")
    return page.replace(_BASE_URL_PLACEHOLDER, literal)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(default_base_url: Optional[str] = None, gateway_factory: Optional[GatewayFactory] = None) -> FastAPI:
    """
    Build the console application.

    Args:
        default_base_url: Base URL pre-filled in the page; defaults to ``$WEAVIATE_URL``.
        gateway_factory: Builds a gateway per request from its connection target;
            defaults to ``WeaviateClient``.
    """
    app = FastAPI(title="Weaviate Console", description="Admin console and proxy for a Weaviate instance")
    base_default = weaviate_url() if default_base_url is None else default_base_url.rstrip("/")

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _body_error(request: Request, exc: RequestValidationError):
        errs = exc.errors()
        first = errs[0] if errs else {}
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        return _error(status.HTTP_400_BAD_REQUEST, f"Invalid {field or 'request'}: {first.get('msg', 'malformed body')}")

    @app.exception_handler(RemoteError)
    async def _remote_error(request: Request, exc: RemoteError):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(requests.RequestException)
    async def _transport_error(request: Request, exc: requests.RequestException):
        logger.warning("Transport error | %s | %s", request.url.path, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception):
        logger.error("Unhandled error | %s | %s: %s", request.url.path, type(exc).__name__, exc, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__)

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return render_page(base_default)

    @app.post("/list")
    def list_objects(body: ListBody):
        return ListObjectsUseCase(gateway_factory).execute(
            ListObjectsRequest(base_url=body.base, class_name=body.class_name, api_key=body.api_key, limit=body.limit)
        )

    @app.post("/search")
    def search_objects(body: SearchBody):
        return SearchObjectsUseCase(gateway_factory).execute(
            SearchObjectsRequest(
                base_url=body.base,
                class_name=body.class_name,
                query=body.query,
                api_key=body.api_key,
                search_type=body.type,
                alpha=body.alpha,
                certainty=body.certainty,
                properties=body.properties,
                limit=body.limit,
            )
        )

    @app.post("/add")
    def add_object(body: AddBody):
        AddObjectUseCase(gateway_factory).execute(
            AddObjectRequest(
                base_url=body.base,
                class_name=body.class_name,
                query=body.query,
                content=body.content,
                api_key=body.api_key,
            )
        )
        return {"status": "ok"}

    @app.post("/delete")
    def delete_object(body: ObjectBody):
        DeleteObjectUseCase(gateway_factory).execute(ObjectRequest(base_url=body.base, object_id=body.id, api_key=body.api_key))
        return {"status": "ok"}

    @app.post("/object")
    def get_object(body: ObjectBody):
        return GetObjectUseCase(gateway_factory).execute(ObjectRequest(base_url=body.base, object_id=body.id, api_key=body.api_key))

    @app.post("/classes")
    def list_classes(body: ConnectionBody):
        return ListClassesUseCase(gateway_factory).execute(InstanceRequest(base_url=body.base, api_key=body.api_key))

    @app.post("/info")
    def instance_info(body: ConnectionBody):
        info = InstanceInfoUseCase(gateway_factory).execute(InstanceRequest(base_url=body.base, api_key=body.api_key))
        return info.to_dict()

    return app


app = create_app()
