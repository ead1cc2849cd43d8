"""Logging setup for Silicon Soul.

Text lines on stdout by default, or JSON lines for log shippers. Each
mounted view logs through its own adapter so records can be filtered by
view (see get_logger).
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Keys set by LogRecord itself; anything else arrived through `extra`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """Renders each record as one JSON line.

    The owning view, when the record came through a view adapter, is lifted
    to the top level:

        {"level": "DEBUG", "view": "hero", "message": "Layer transition ...",
         "timestamp": "...", "context": {"logger_name": "...", "line": 42}}
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            context["error_type"] = exc_type.__name__ if exc_type else None
            context["error_message"] = str(exc_value) if exc_value else None
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        view = extras.pop("view", None)
        context.update(extras)

        entry: dict[str, Any] = {"level": record.levelname}
        if view is not None:
            entry["view"] = view
        entry["message"] = record.getMessage()
        entry["timestamp"] = datetime.fromtimestamp(record.created, tz=UTC).isoformat()
        entry["context"] = context
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Configure root logging; each call replaces the previous handlers.

    Args:
        level: Level name, case-insensitive.
        format_string: Text format. Ignored when structured=True.
        filename: Log file path. Stdout when None.
        structured: Emit JSON lines instead of text.
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler(sys.stdout)

    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logging.basicConfig(level=getattr(logging, level.upper()), handlers=[handler], force=True)

    # Scheduler callbacks run on the event loop; its debug chatter is noise.
    logging.getLogger("asyncio").setLevel(logging.ERROR)


def get_logger(name: str, view: str | None = None) -> logging.Logger | logging.LoggerAdapter:
    """Return the module logger, tagged with the view name when given.

    Example:
        >>> get_logger("siliconsoul.core.scroll.controller", view="hero").extra
        {'view': 'hero'}
    """
    base = logging.getLogger(name)
    if view is None:
        return base
    return logging.LoggerAdapter(base, {"view": view})
