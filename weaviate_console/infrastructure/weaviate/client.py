from __future__ import annotations

import json
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ...domain.errors import InvalidResponseBody, RemoteRequestFailed
from ...domain.interfaces import WeaviateGateway
from ...domain.models import ConnectionTarget, RemoteResponse
from ..config import http_timeout_seconds
from ..logging import get_logger

logger = get_logger("weaviate_console.weaviate.client")


class WeaviateClient(WeaviateGateway):
    """Gateway adapter for the Weaviate REST and GraphQL endpoints.

    One instance serves one inbound request; the connection target is never
    shared or cached between requests.
    """

    def __init__(self, target: ConnectionTarget, timeout: Optional[float] = None) -> None:
        self._target = target
        self._timeout = timeout if timeout is not None else http_timeout_seconds()

    def _headers(self, overrides: Optional[Dict[str, str]]) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._target.api_key or ''}",
        }
        headers.update(overrides or {})
        return headers

    def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> RemoteResponse:
        url = f"{self._target.base_url}{path}"
        data = json.dumps(body) if body is not None else None
        r = requests.request(method, url, headers=self._headers(headers), data=data, timeout=self._timeout)
        text = r.text or ""
        response = RemoteResponse(status_code=r.status_code, raw_body=text)

        if not response.ok:
            msg = text.strip() or f"{r.status_code} {r.reason or ''}".strip()
            logger.warning("Request failed | %s %s | status=%s", method, path, r.status_code)
            raise RemoteRequestFailed(msg, status_code=r.status_code, path=path)

        # 204 No Content (e.g. DELETE) carries no body to decode
        if r.status_code == 204:
            return response

        try:
            parsed = json.loads(text)
        except ValueError:
            logger.warning("Invalid JSON response | %s %s", method, path)
            raise InvalidResponseBody(text.strip() or "empty response", path=path) from None
        return RemoteResponse(status_code=r.status_code, raw_body=text, parsed=parsed)

    def request_json(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        return self.request(path, method=method, body=body, headers=headers).parsed

    def graphql(self, query: str) -> Any:
        return self.request_json("/v1/graphql", method="POST", body={"query": query})

    def get_object(self, object_id: str) -> Any:
        """
        Fetch one object, preferring the variant that includes its vector.

        Some classes or deployments refuse ``include=vector``; any failure of
        the first attempt triggers a single retry without it, and the retry's
        failure is what propagates.
        """
        path = f"/v1/objects/{quote(str(object_id), safe='')}"
        try:
            return self.request_json(f"{path}?include=vector")
        except (RemoteRequestFailed, InvalidResponseBody, requests.RequestException) as ex:
            logger.info("Object fetch with vector failed, retrying without | id=%s | %s", object_id, ex)
        return self.request_json(path)

    def create_object(self, class_name: str, properties: Dict[str, Any]) -> Any:
        return self.request_json(
            "/v1/objects",
            method="POST",
            body={"class": class_name, "properties": properties},
        )

    def delete_object(self, object_id: str) -> Any:
        return self.request_json(f"/v1/objects/{quote(str(object_id), safe='')}", method="DELETE")

    def meta(self) -> Any:
        return self.request_json("/v1/meta")

    def schema(self) -> Any:
        return self.request_json("/v1/schema")
