"""
Search: ranks each document by its semantic similarity to a query.

Documents are given either inline (up to 200 strings) or as the id of an
uploaded file. Passing both is discouraged by the API but not rejected here.
``max_rerank`` and ``return_metadata`` only take effect together with ``file``.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from openai_api.endpoints.base import Endpoint


class Search(Endpoint):
    NAME: ClassVar[str] = "search"
    ENDPOINT: ClassVar[str] = "/engines/{engine_id}/search"

    query: str = ""
    documents: list[str] = Field(default_factory=list)
    file: str | None = None
    max_rerank: int = 200
    return_metadata: bool = False
    user: str = ""
