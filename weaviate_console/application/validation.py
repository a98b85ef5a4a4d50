from __future__ import annotations

import re
from typing import Any, Optional
from urllib.parse import urlparse

from ..domain.errors import ValidationError
from ..domain.models import ConnectionTarget

# GraphQL name grammar; class names are interpolated into query text unescaped.
_CLASS_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def is_valid_http_url(value: str) -> bool:
    if not value:
        return False
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def connection_target(base_url: Optional[str], api_key: Optional[str]) -> ConnectionTarget:
    """Build the per-request connection target, rejecting a missing or scheme-less base URL."""
    base = (base_url or "").strip()
    if not base:
        raise ValidationError("Missing base URL")
    if not is_valid_http_url(base):
        raise ValidationError(f"Invalid base URL: {base} (expected http:// or https://)")
    return ConnectionTarget(base_url=base.rstrip("/"), api_key=api_key or "")


def require(value: Any, what: str) -> Any:
    """Return ``value`` unless it is None or blank text."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing {what}")
    return value


def require_class_name(value: Optional[str]) -> str:
    name = str(require(value, "class name")).strip()
    if not _CLASS_NAME_RE.match(name):
        raise ValidationError(f"Invalid class name: {name}")
    return name
