from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .models import RemoteResponse


class WeaviateGateway(ABC):
    """Port for the remote Weaviate instance (REST + GraphQL)."""

    @abstractmethod
    def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> RemoteResponse:
        """Perform one authenticated call and decode the body as JSON.

        Raises:
            RemoteRequestFailed: Non-success HTTP status.
            InvalidResponseBody: Success status with a body that is not JSON.
        """
        raise NotImplementedError

    @abstractmethod
    def graphql(self, query: str) -> Any:
        """POST a GraphQL document and return the decoded response."""
        raise NotImplementedError

    @abstractmethod
    def get_object(self, object_id: str) -> Any:
        """Fetch one object, with its vector when the instance allows it."""
        raise NotImplementedError

    @abstractmethod
    def create_object(self, class_name: str, properties: Dict[str, Any]) -> Any:
        """Create one object in ``class_name``; returns the decoded response."""
        raise NotImplementedError

    @abstractmethod
    def delete_object(self, object_id: str) -> Any:
        """Delete one object by id."""
        raise NotImplementedError

    @abstractmethod
    def meta(self) -> Any:
        """Return the ``/v1/meta`` payload."""
        raise NotImplementedError

    @abstractmethod
    def schema(self) -> Any:
        """Return the ``/v1/schema`` payload."""
        raise NotImplementedError
