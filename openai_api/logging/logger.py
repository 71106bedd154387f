"""
Structured JSON logging for applications built on the client.

The library itself only creates module loggers; it never touches handlers on
import. Call setup_logging once at startup to get single-line JSON records on
stdout, tagged with the application name.

Request records from ``openai_api.client`` carry their context in the
``_extra`` attribute (endpoint, url and, once a reply arrived, status_code).
Those keys are written at the top level of the JSON object so log pipelines
can filter on them directly.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

_RESERVED = ("ts", "level", "app", "logger", "msg", "exc")


class JSONFormatter(logging.Formatter):
    """One JSON object per record; ``_extra`` keys are flattened into it."""

    def __init__(self, app_name: str) -> None:
        super().__init__()
        self._app = app_name

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "app": self._app,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for key, value in (getattr(record, "_extra", None) or {}).items():
            if key in _RESERVED:
                key = f"extra_{key}"
            entry[key] = value

        if record.exc_info and record.exc_info[1]:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(app_name: str, level: str | None = None) -> logging.Logger:
    """
    Install the JSON formatter on stdout for the whole process.

    The level comes from ``level``, then LOG_LEVEL, then INFO. httpx and its
    HTTP/1.1 and HTTP/2 backends are held at WARNING so per-connection records
    do not drown the request records of the client.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter(app_name))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    for name in ("httpx", "httpcore", "hpack"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger(app_name)
