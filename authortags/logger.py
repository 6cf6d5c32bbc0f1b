"""structlog wiring for the author tags.

Lookup misses are the only thing these tags report, so the setup is small:
coloured one-liners when someone is building the site in a terminal, JSON
lines everywhere else (hosted builds, or when a log file is requested).
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import structlog


def _is_tty() -> bool:
    try:
        return os.isatty(sys.stdout.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def _renderers(json_lines: bool) -> list:
    if json_lines:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def _attach_handlers(level: int, log_file: Optional[Path]) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    # setup() may run once per Environment; replace rather than stack.
    root.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        root.addHandler(handler)


def configure_logging(log_level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """Route structlog through stdlib logging at *log_level*.

    Unknown level names fall back to INFO. With *log_file* the same JSON
    lines are also appended to that file.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    _attach_handlers(level, log_file)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            *_renderers(json_lines=log_file is not None or not _is_tty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.BoundLogger:
    return structlog.get_logger(name)
