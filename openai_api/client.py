"""
Async HTTP client for the OpenAI API.

One Client holds the API key and a pooled httpx.AsyncClient. Every call to
``create`` sends exactly one POST built by the endpoint and parses the reply
into a Response. Failures are mapped onto the ResponseError taxonomy and
returned to the caller as exceptions; nothing is retried.
"""

from __future__ import annotations

import logging
import time

import httpx
from pydantic import ValidationError

from openai_api.config import ClientConfig
from openai_api.endpoints.base import Endpoint
from openai_api.endpoints.models import Response
from openai_api.errors import (
    ResponseIOError,
    SerializationError,
    StatusCodeError,
    TransportError,
)
from openai_api.observability.metrics import (
    request_latency,
    requests_total,
    tokens_total,
)

logger = logging.getLogger(__name__)


def build_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Pooled HTTPS client: HTTP/2 when enabled, idle connections expire."""
    limits = httpx.Limits(keepalive_expiry=config.pool_idle_timeout)
    return httpx.AsyncClient(
        http2=config.http2,
        limits=limits,
        timeout=config.request_timeout,
    )


class Client:
    """
    Issues requests for any Endpoint.

    Usage::

        async with Client("sk-...") as client:
            edit = Edit(input="What day of the wek is it?",
                        instruction="Fix the spelling mistakes")
            response = await client.create("text-davinci-edit-001", edit)

    A caller-supplied ``http_client`` is used as-is and left open on
    ``aclose``; the client only closes the pool it created.
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or ClientConfig(api_key=api_key)
        self.api_key = api_key
        self._owns_http = http_client is None
        self._http = http_client or build_http_client(self._config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def create(self, engine_id: str | None, endpoint: Endpoint) -> Response:
        """
        Send ``endpoint`` and return the parsed reply.

        ``engine_id`` is required by engine-scoped endpoints (completions,
        edits, search) and ignored by the others.

        Raises:
            ValueError: engine-scoped endpoint without an engine id.
            TransportError: the request never got a usable HTTP answer.
            ResponseIOError: local I/O failure.
            StatusCodeError: non-2xx status.
            SerializationError: reply body cannot be decoded or is not a
                valid Response.
        """
        api_request = endpoint.request(
            self.api_key,
            engine_id,
            base_url=self._config.base_url,
            organization=self._config.organization,
        )
        name = endpoint.NAME
        logger.debug(
            "Requesting %s: %s",
            name,
            api_request.url,
            extra={"_extra": {"endpoint": name, "url": api_request.url}},
        )

        start = time.monotonic()
        try:
            http_response = await self._http.request(
                api_request.method,
                api_request.url,
                headers=api_request.headers,
                content=api_request.body,
            )
        except httpx.DecodingError as exc:
            # The reply arrived but its body could not be decoded.
            requests_total.labels(endpoint=name, outcome="serialization_error").inc()
            raise SerializationError(exc) from exc
        except httpx.RequestError as exc:
            requests_total.labels(endpoint=name, outcome="transport_error").inc()
            raise TransportError(exc) from exc
        except OSError as exc:
            requests_total.labels(endpoint=name, outcome="io_error").inc()
            raise ResponseIOError(exc) from exc
        finally:
            request_latency.labels(endpoint=name).observe(time.monotonic() - start)

        if not http_response.is_success:
            requests_total.labels(endpoint=name, outcome="status_error").inc()
            logger.warning(
                "%s request failed with status %d",
                name,
                http_response.status_code,
                extra={
                    "_extra": {
                        "endpoint": name,
                        "status_code": http_response.status_code,
                        "url": api_request.url,
                    }
                },
            )
            raise StatusCodeError(http_response.status_code, http_response.text)

        try:
            response = Response.model_validate_json(http_response.content)
        except ValidationError as exc:
            requests_total.labels(endpoint=name, outcome="serialization_error").inc()
            raise SerializationError(exc) from exc

        requests_total.labels(endpoint=name, outcome="success").inc()
        if response.usage:
            tokens_total.labels(endpoint=name, direction="prompt").inc(
                response.usage.prompt_tokens
            )
            tokens_total.labels(endpoint=name, direction="completion").inc(
                response.usage.completion_tokens
            )

        logger.debug(
            "Response from %s: %r",
            name,
            response,
            extra={
                "_extra": {
                    "endpoint": name,
                    "status_code": http_response.status_code,
                    "url": api_request.url,
                }
            },
        )
        return response

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
