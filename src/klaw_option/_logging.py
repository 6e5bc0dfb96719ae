"""Logging for klaw-option.

Library loggers are structlog loggers wrapped around stdlib loggers, so every
event goes through the host's stdlib logging setup: levels below a logger's
effective level are dropped before any processing, and nothing is printed
until a handler accepts the event. `configure_logging` installs that handler
for applications that have none, rendering structlog events and plain stdlib
records alike as JSON or console lines.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]

_timestamper = structlog.processors.TimeStamper(fmt='iso')


def _event_processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        _timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the stdlib logger `name`.

    The result does not depend on `structlog.configure()`; whatever the
    application did with structlog, library events follow stdlib levels
    and handlers.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_event_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level: Root logging level ("DEBUG", "INFO", "WARNING", ...).
        json_output: Render JSON lines; otherwise structlog's console renderer.

    Raises:
        ValueError: If level is not a known logging level name.
    """
    numeric_level = logging.getLevelNamesMapping().get(level.upper())
    if numeric_level is None:
        msg = f'Unknown log level: {level!r}'
        raise ValueError(msg)

    if json_output:
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            # Applied only to records that did not come from structlog.
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                _timestamper,
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)
