"""
Answer: answers a question from a set of documents and a few
question/answer examples.

This is meant for question answering over a source of truth such as company
documentation. When ``documents`` is empty and no ``file`` is given, the
answer is derived from the examples alone.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from openai_api.endpoints.base import Endpoint
from openai_api.endpoints.models import Model


class Answer(Endpoint):
    NAME: ClassVar[str] = "answers"
    ENDPOINT: ClassVar[str] = "/answers"

    model: Model = Model.ADA
    question: str = ""
    # (question, answer) pairs
    examples: list[tuple[str, str]] = Field(default_factory=list)
    # Context the examples were answered from.
    examples_context: str = ""
    documents: list[str] = Field(default_factory=list)
    file: str | None = None
    search_model: Model = Model.ADA
    # Documents ranked by search when using file.
    max_rerank: int = 200
    temperature: float = 0.0
    logprobs: int = 0
    max_tokens: int = 16
    stop: str | list[str] | None = None
    n: int = 1
    logit_bias: dict[str, int] = Field(default_factory=dict)
    return_metadata: bool = False
    return_prompt: bool = False
    expand: list[str] = Field(default_factory=list)
    user: str = ""
