"""Log output for the ``modeltypes`` logger namespace.

Every module logs through stdlib ``logging`` under ``modeltypes.*``.
:func:`configure_logging` gives that namespace one structlog-rendered
stream handler. The root logger and any handlers the host application
installed are left untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = "modeltypes"

_HANDLER_NAME = "modeltypes.structlog"


def _formatter(log_json: bool, stream: TextIO) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route the ``modeltypes`` logger to *stream* (default: stderr).

    A handler installed by an earlier call is replaced, so repeated calls
    never stack output. Records stop propagating to the root logger while
    the handler is installed, otherwise a host that logs to the console
    would print each line twice.

    Args:
        verbose: DEBUG level for the package logger. When False, WARNING+.
        log_json: JSON lines instead of console output.
        stream: Destination stream, ``sys.stderr`` when omitted.

    Returns:
        The installed handler.
    """
    stream = stream or sys.stderr
    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_formatter(log_json, stream))

    pkg = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in pkg.handlers if h.get_name() == _HANDLER_NAME]:
        pkg.removeHandler(old)
        old.close()
    pkg.addHandler(handler)
    pkg.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg.propagate = False
    return handler


def reset_logging() -> None:
    """Remove the handler installed by :func:`configure_logging`.

    The package logger goes back to propagating to the host's handlers
    at the inherited level.
    """
    pkg = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in pkg.handlers if h.get_name() == _HANDLER_NAME]:
        pkg.removeHandler(old)
        old.close()
    pkg.setLevel(logging.NOTSET)
    pkg.propagate = True
