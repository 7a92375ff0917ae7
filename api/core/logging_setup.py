"""
Logging setup: one stream handler on the root logger, JSON or plain text.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

EXTRA_FIELDS = ("product_id", "path", "rows")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip() or "INFO"


def log_format() -> str:
    return os.environ.get("LOG_FORMAT", "text").strip().lower() or "text"


def setup_logging(level: str | None = None, fmt: str | None = None) -> logging.Handler:
    """
    Install the app handler on the root logger.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.
    """
    level = level or log_level()
    fmt = fmt or log_format()

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    handler.set_name("product-api")

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "product-api":
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
