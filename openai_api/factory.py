"""
Client construction entry points.

``new`` builds a client from an explicit API key. ``get_client`` returns a
process-wide client configured from the environment:

  OPENAI_API_KEY            API key (overridable by argument)
  OPENAI_API_BASE           base URL, default https://api.openai.com/v1
  OPENAI_ORGANIZATION       sent as the OpenAI-Organization header
  OPENAI_HTTP2              enable HTTP/2: 1|true|yes|on or 0|false|no|off (default true)
  OPENAI_POOL_IDLE_TIMEOUT  keep-alive expiry in seconds (default 90)
  OPENAI_REQUEST_TIMEOUT    per-request timeout in seconds (default 120)
"""

from __future__ import annotations

import dataclasses
import logging

from openai_api.client import Client
from openai_api.config import ClientConfig

logger = logging.getLogger(__name__)

_instance: Client | None = None


def new(api_key: str, config: ClientConfig | None = None) -> Client:
    if config is None:
        config = ClientConfig(api_key=api_key)
    return Client(api_key, config=config)


def get_client(api_key: str | None = None) -> Client:
    """
    Return a singleton Client configured from the environment.

    Args:
        api_key: Override for OPENAI_API_KEY.
    """
    global _instance
    if _instance is not None:
        return _instance

    config = ClientConfig.from_env()
    key = api_key or config.api_key
    if not key:
        raise ValueError(
            "An API key is required. Pass api_key or set OPENAI_API_KEY in your environment."
        )
    config = dataclasses.replace(config, api_key=key)

    _instance = Client(key, config=config)
    logger.info(
        "OpenAI client initialized (base_url=%s, http2=%s)",
        config.base_url,
        config.http2,
    )
    return _instance


def reset_client() -> None:
    """Reset the singleton (for testing)."""
    global _instance
    _instance = None
