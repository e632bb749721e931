"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)` using short
`event_name key=value` messages; this module only decides where they go
and how they look.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

from . import settings

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(*, level: str | None = None, fmt: str | None = None) -> None:
    """
    Attach a single stdout handler to the root logger.

    Calling this more than once only adjusts the level.
    """
    global _configured
    root = logging.getLogger()
    root.setLevel(level or settings.log_level())
    if _configured:
        return None

    handler = logging.StreamHandler(sys.stdout)
    if (fmt or settings.log_format()) == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root.addHandler(handler)
    _configured = True
