from openai_api.endpoints.answer import Answer
from openai_api.endpoints.base import ApiRequest, Endpoint
from openai_api.endpoints.classification import Classification
from openai_api.endpoints.completion import Completion
from openai_api.endpoints.edits import Edit
from openai_api.endpoints.models import (
    Choice,
    Logprobs,
    Model,
    Response,
    SearchResult,
    SelectedDocument,
    SelectedExample,
    Usage,
)
from openai_api.endpoints.search import Search

__all__ = [
    "Answer",
    "ApiRequest",
    "Choice",
    "Classification",
    "Completion",
    "Edit",
    "Endpoint",
    "Logprobs",
    "Model",
    "Response",
    "Search",
    "SearchResult",
    "SelectedDocument",
    "SelectedExample",
    "Usage",
]
