"""Structured logging for utopia.

Library loggers are structlog loggers wrapping :mod:`logging` loggers under
the ``utopia`` hierarchy, so events stay silent until an application either
configures :mod:`logging` itself or calls :func:`configure_logging`. The
level check runs first in the processor chain, so disabled events are
dropped before anything is rendered.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from .config import get_settings


_ROOT = "utopia"


def _build_processors(*, json_logs: bool) -> list[Any]:
    renderer: Any = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


# Shared by every library logger; configure_logging swaps its contents in place.
PROCESSORS: list[Any] = _build_processors(json_logs=False)


def _level_number(level_name: str) -> int:
    numeric_level = logging.getLevelName(level_name.upper())
    if not isinstance(numeric_level, int):
        msg = f"unknown log level: {level_name}"
        raise ValueError(msg)
    return numeric_level


def configure_logging(level: str | None = None, *, json_logs: bool | None = None) -> None:
    """Attach a stream handler to the ``utopia`` logger and pick a renderer.

    Arguments left as ``None`` fall back to :class:`~utopia.config.Settings`.
    """
    settings = get_settings()
    numeric_level = _level_number(level or settings.log_level)
    use_json = settings.log_json if json_logs is None else json_logs

    PROCESSORS[:] = _build_processors(json_logs=use_json)

    root = logging.getLogger(_ROOT)
    root.setLevel(numeric_level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)


def get_logger(name: str) -> Any:
    """Return a structlog logger proxying to the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
