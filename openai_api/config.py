from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.openai.com/v1"


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if raw == "":
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(
        f"{name}={raw!r} is not a boolean. Use one of: {', '.join(_TRUE + _FALSE)}"
    )


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    organization: str | None = None
    http2: bool = True
    pool_idle_timeout: float = 90.0
    request_timeout: float = 120.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ClientConfig:
        return cls(
            api_key=os.environ.get("OPENAI_API_KEY", ""),
            base_url=os.environ.get("OPENAI_API_BASE", "") or DEFAULT_BASE_URL,
            organization=os.environ.get("OPENAI_ORGANIZATION") or None,
            http2=_env_bool("OPENAI_HTTP2", True),
            pool_idle_timeout=float(os.environ.get("OPENAI_POOL_IDLE_TIMEOUT", "90") or 90),
            request_timeout=float(os.environ.get("OPENAI_REQUEST_TIMEOUT", "120") or 120),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )
