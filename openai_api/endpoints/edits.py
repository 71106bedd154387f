from __future__ import annotations

from typing import ClassVar

from openai_api.endpoints.base import Endpoint


class Edit(Endpoint):
    """Given an input text and an instruction, returns an edited version of the input."""

    NAME: ClassVar[str] = "edits"
    ENDPOINT: ClassVar[str] = "/engines/{engine_id}/edits"

    input: str = ""
    instruction: str = ""
    # Alter temperature or top_p, not both.
    temperature: float = 0.0
    top_p: float = 0.0
