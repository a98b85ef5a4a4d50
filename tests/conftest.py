"""
Pytest configuration and fixtures for weaviate console tests.

Provides fake HTTP responses, a mock gateway and a factory that hands it out,
so no test touches the network.
"""

import os
from unittest.mock import Mock
import pytest

from weaviate_console.domain.interfaces import WeaviateGateway
from weaviate_console.domain.models import ConnectionTarget


BASE_URL = "http://weaviate.test:8080"


@pytest.fixture
def target():
    """Connection target used by client tests."""
    return ConnectionTarget(base_url=BASE_URL, api_key="secret")


@pytest.fixture
def make_response():
    """Factory for requests.Response-like objects."""

    def _make(status_code=200, text="{}", reason="OK"):
        resp = Mock()
        resp.status_code = status_code
        resp.text = text
        resp.reason = reason
        return resp

    return _make


@pytest.fixture
def mock_gateway():
    """Mock gateway with the WeaviateGateway surface."""
    gw = Mock(spec=WeaviateGateway)
    gw.graphql.return_value = {"data": {}}
    gw.meta.return_value = {"version": "1.24.0"}
    gw.schema.return_value = {"classes": []}
    gw.get_object.return_value = {"id": "obj-1", "properties": {}}
    gw.create_object.return_value = {"id": "obj-new"}
    gw.delete_object.return_value = None
    return gw


@pytest.fixture
def gateway_factory(mock_gateway):
    """Factory that records the targets it was asked for and returns the mock gateway."""
    factory = Mock(return_value=mock_gateway)
    return factory


@pytest.fixture
def clean_environment():
    """Clean console environment variables for testing."""
    env_vars_to_clean = [
        "WEAVIATE_URL",
        "WEAVIATE_API_KEY",
        "WEAVIATE_CONSOLE_HOST",
        "WEAVIATE_CONSOLE_PORT",
        "WEAVIATE_HTTP_TIMEOUT",
        "WEAVIATE_CONSOLE_MAX_WORKERS",
    ]

    original_env = {}
    for var in env_vars_to_clean:
        if var in os.environ:
            original_env[var] = os.environ[var]
            del os.environ[var]

    yield

    for var in env_vars_to_clean:
        os.environ.pop(var, None)
    for var, value in original_env.items():
        os.environ[var] = value


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "web: mark test as HTTP route test"
    )
    config.addinivalue_line(
        "markers", "cli: mark test as CLI command test"
    )
