"""
Completion: given a prompt, the engine returns one or more predicted
continuations, optionally with per-token log probabilities.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from openai_api.endpoints.base import Endpoint


class Completion(Endpoint):
    NAME: ClassVar[str] = "completions"
    ENDPOINT: ClassVar[str] = "/engines/{engine_id}/completions"

    prompt: str | list[str] = "<|endoftext|>"
    # Text appended after the inserted completion.
    suffix: str | None = None
    max_tokens: int = 16
    temperature: float = 1.0
    top_p: float = 1.0
    n: int = 1
    # Number of most likely tokens to return per position, at most 5.
    logprobs: int | None = None
    echo: bool = False
    stop: str | list[str] | None = None
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0
    # Server-side candidates; must be >= n.
    best_of: int = 1
    logit_bias: dict[str, int] = Field(default_factory=dict)
    user: str = ""
