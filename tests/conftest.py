import json

import httpx
import pytest

from openai_api import Client, ClientConfig
from openai_api.factory import reset_client


class Recorder:
    """Collects the requests seen by a MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_client(recorder):
    """Build a Client whose transport is answered by ``handler``."""

    def _make(handler, config: ClientConfig | None = None) -> Client:
        def _record(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return Client("sk-test", config=config, http_client=http)

    return _make


@pytest.fixture(autouse=True)
def _reset_factory():
    reset_client()
    yield
    reset_client()
