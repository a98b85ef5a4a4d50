from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Dict, Optional


def parse_dotenv(dotenv_path: Path) -> Dict[str, str]:
    """Parse a simple .env file (KEY=VALUE per line, '#' comments, quotes stripped)."""
    env: Dict[str, str] = {}
    if dotenv_path.exists():
        with contextlib.suppress(OSError):
            for raw in dotenv_path.read_text(encoding="utf-8", errors="ignore").splitlines():
                s = raw.strip()
                if not s or s.startswith("#") or "=" not in s:
                    continue
                k, v = s.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k:
                    env[k] = v
    return env


def env_get(key: str) -> Optional[str]:
    """Get environment value from process env, falling back to .env in CWD."""
    v = os.getenv(key)
    if v is not None and v.strip():
        return v.strip()
    local = parse_dotenv(Path(".env"))
    v2 = local.get(key)
    return v2.strip() if v2 is not None and v2.strip() else None


def env_str(name: str, default: str) -> str:
    return env_get(name) or default


def env_int(name: str, default: int) -> int:
    try:
        return int(env_str(name, str(default)))
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    try:
        return float(env_str(name, str(default)))
    except ValueError:
        return default


def weaviate_url() -> str:
    return env_str("WEAVIATE_URL", "").rstrip("/")


def weaviate_api_key() -> str:
    return env_str("WEAVIATE_API_KEY", "")


def server_host() -> str:
    return env_str("WEAVIATE_CONSOLE_HOST", "127.0.0.1")


def server_port() -> int:
    return env_int("WEAVIATE_CONSOLE_PORT", 9090)


def http_timeout_seconds() -> float:
    """Per-call timeout for requests to Weaviate; defaults to 30 seconds."""
    return env_float("WEAVIATE_HTTP_TIMEOUT", 30.0)


def count_workers() -> int:
    """Upper bound on concurrent aggregate-count calls during instance info."""
    return max(1, env_int("WEAVIATE_CONSOLE_MAX_WORKERS", 8))
