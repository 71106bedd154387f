"""Response-side data models shared by every endpoint."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Model(str, Enum):
    ADA = "ada"
    BABBAGE = "babbage"
    CURIE = "curie"
    DAVINCI = "davinci"


class Logprobs(BaseModel):
    tokens: list[str] = Field(default_factory=list)
    token_logprobs: list[float | None] = Field(default_factory=list)
    top_logprobs: list[dict[str, float] | None] | None = None
    text_offset: list[int] = Field(default_factory=list)


class Choice(BaseModel):
    text: str
    index: int
    logprobs: Logprobs | None = None
    finish_reason: str | None = None


class SearchResult(BaseModel):
    """One ranked document in a search reply."""

    document: int
    object: str
    score: float
    text: str | None = None
    metadata: Any = None


class SelectedExample(BaseModel):
    document: int
    label: str
    text: str


class SelectedDocument(BaseModel):
    document: int
    text: str


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Response(BaseModel):
    """
    Union of the reply schemas of all endpoints.

    Every field is optional because each endpoint only fills its own subset:
    completions and edits use ``choices``, search uses ``data``,
    classifications use ``label``/``selected_examples`` and answers use
    ``answers``/``selected_documents``. Unknown fields are ignored.
    """

    id: str | None = None
    object: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[Choice] | None = None
    data: list[SearchResult] | None = None
    completion: str | None = None
    label: str | None = None
    search_model: Model | None = None
    selected_examples: list[SelectedExample] | None = None
    selected_documents: list[SelectedDocument] | None = None
    answers: list[str] | None = None
    prompt: str | None = None
    usage: Usage | None = None
