"""
Classification: predicts the most likely label for a query from a set of
labeled examples.

Examples come inline as ``(text, label)`` pairs or from an uploaded file; the
best matches are picked with ``search_model`` and the label is produced by
``model``. Label strings are capitalized by the API.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from openai_api.endpoints.base import Endpoint
from openai_api.endpoints.models import Model


class Classification(Endpoint):
    NAME: ClassVar[str] = "classifications"
    ENDPOINT: ClassVar[str] = "/classifications"

    model: Model = Model.DAVINCI
    query: str = ""
    examples: list[tuple[str, str]] = Field(default_factory=list)
    file: str | None = None
    # Collected from the examples when left empty.
    labels: list[str] = Field(default_factory=list)
    search_model: Model = Model.ADA
    temperature: float = 0.0
    logprobs: int = 0
    # Examples ranked by search when using file.
    max_examples: int = 200
    logit_bias: dict[str, int] = Field(default_factory=dict)
    return_prompt: bool = False
    return_metadata: bool = False
    expand: list[str] = Field(default_factory=list)
    user: str = ""
