"""
Endpoint contract: a serializable payload that knows where it is sent.

Each concrete endpoint is a pydantic model holding the request fields with
their documented defaults, plus two class constants:

- NAME: short label used for logging and metrics
- ENDPOINT: path below the API base URL, ``{engine_id}`` marks engine-scoped
  routes

``request`` is pure: it renders the method, URL, headers and JSON body and
never touches the network. The client sends the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from openai_api.config import DEFAULT_BASE_URL

_ENGINE_PLACEHOLDER = "{engine_id}"


@dataclass
class ApiRequest:
    """Everything needed to issue one HTTP call."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


class Endpoint(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    NAME: ClassVar[str]
    ENDPOINT: ClassVar[str]

    @classmethod
    def requires_engine(cls) -> bool:
        return _ENGINE_PLACEHOLDER in cls.ENDPOINT

    @classmethod
    def url(cls, engine_id: str | None = None, base_url: str = DEFAULT_BASE_URL) -> str:
        path = cls.ENDPOINT
        if cls.requires_engine():
            if not engine_id:
                raise ValueError(f"The {cls.NAME} endpoint requires an engine id")
            path = path.replace(_ENGINE_PLACEHOLDER, engine_id)
        return base_url.rstrip("/") + path

    def payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    def body(self) -> bytes:
        return self.model_dump_json(exclude_none=True).encode("utf-8")

    def request(
        self,
        auth_token: str,
        engine_id: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        organization: str | None = None,
    ) -> ApiRequest:
        headers = {
            "Authorization": f"Bearer {auth_token}",
            "Content-Type": "application/json",
        }
        if organization:
            headers["OpenAI-Organization"] = organization

        return ApiRequest(
            method="POST",
            url=self.url(engine_id, base_url),
            headers=headers,
            body=self.body(),
        )
