"""Structured logging and the package error type.

Loggers wrap stdlib ``logging`` loggers, so nothing is emitted unless a
handler is installed: library users stay quiet, the CLI calls
``configure_logging`` to get console and JSON output.
"""

from __future__ import annotations

import logging
import sys

import structlog

_ROOT = "xdirs"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


class XdirsError(Exception):
    """Error raised for misuse of the xdirs API.

    Path absence is never an error; this signals programming or input
    mistakes such as an unknown platform name.
    """


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(verbose: bool = False, json_log: str | None = None) -> None:
    """Install handlers on the package logger.

    Args:
        verbose: Log DEBUG and above to stderr (default is WARNING)
        json_log: Also write JSON lines to this file ("-" for stderr)
    """
    root = logging.getLogger(_ROOT)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False)
        )
    )
    root.addHandler(console)

    if json_log:
        if json_log == "-":
            json_handler: logging.Handler = logging.StreamHandler(sys.stderr)
        else:
            json_handler = logging.FileHandler(json_log, encoding="utf-8")
        json_handler.setLevel(logging.DEBUG)
        json_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer()
            )
        )
        root.addHandler(json_handler)

    root.setLevel(logging.DEBUG)
    root.propagate = False
