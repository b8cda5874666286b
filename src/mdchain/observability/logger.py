"""Structured JSON logger for mdchain.

Every log record is emitted as a single-line JSON object::

    {"ts": "2026-10-19T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "mdchain.render", "message": "document rendered",
     "op": "to_string", "fragments": 3, "chars": 42}

mdchain is a library, so its loggers start at ``WARNING``: a rendered
document only produces output when something was tolerated (a table row
with the wrong number of cells, for instance).  Lower the level on the
``mdchain`` logger to see per-render debug records.

Usage::

    from mdchain.observability import get_logger

    log = get_logger("mdchain.render")
    log.warning("odd input", extra={"extra_fields": {"row": 3}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (ISO-8601 UTC timestamp), ``level``,
    ``logger`` and ``message``.  Fields passed via
    ``extra={"extra_fields": {...}}`` are merged into the top-level
    object; ``exception`` and ``stack_info`` are added when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(
            record, "extra_fields", None
        )
        if extra_fields is not None:
            log_entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# ---------------------------------------------------------------------------
# One handler per logger name so that ``get_logger`` is idempotent.
# ---------------------------------------------------------------------------
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "mdchain",
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"mdchain"``.
    level:
        Minimum log level, as an ``int`` or a case-insensitive level name.
        Only applied the first time a given *name* is configured.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        A logger with a :class:`StructuredFormatter` handler attached.
        Repeated calls with the same *name* return the same logger and do
        not add duplicate handlers.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved_level = (
            logging.getLevelName(level.upper())
            if isinstance(level, str)
            else level
        )
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)

        # Avoid duplicates when the root logger also has handlers.
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
