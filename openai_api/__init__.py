from openai_api.client import Client
from openai_api.config import DEFAULT_BASE_URL, ClientConfig
from openai_api.endpoints import (
    Answer,
    ApiRequest,
    Classification,
    Completion,
    Edit,
    Endpoint,
    Model,
    Response,
    Search,
)
from openai_api.errors import (
    ResponseError,
    ResponseIOError,
    SerializationError,
    StatusCodeError,
    TransportError,
)
from openai_api.factory import get_client, new, reset_client

__all__ = [
    "Answer",
    "ApiRequest",
    "Classification",
    "Client",
    "ClientConfig",
    "Completion",
    "DEFAULT_BASE_URL",
    "Edit",
    "Endpoint",
    "Model",
    "Response",
    "ResponseError",
    "ResponseIOError",
    "Search",
    "SerializationError",
    "StatusCodeError",
    "TransportError",
    "get_client",
    "new",
    "reset_client",
]
