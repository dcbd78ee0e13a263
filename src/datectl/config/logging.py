"""structlog configuration for datectl.

Log lines go to stderr so they never mix with a command's answer on
stdout. The console renderer is the default; ``--log-json`` switches to
JSON lines. ``--verbose`` lowers the ``datectl`` logger to DEBUG, which
shows failed and clamped operations. Records logged while a service
operation runs carry its name as ``op``.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

DATECTL_LOGGER = "datectl"

# Applied to structlog events and to stdlib records alike.
_SHARED_PROCESSORS: tuple[Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=list(_SHARED_PROCESSORS),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route structlog and stdlib logging to a single stderr handler.

    Safe to call more than once: the root handler is replaced, not stacked,
    and context bound by an earlier invocation is cleared.

    Args:
        verbose: Enable DEBUG-level output from ``datectl.*`` loggers.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.clear_contextvars()

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_stderr_handler(log_json))
    root_logger.setLevel(logging.WARNING)

    level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger(DATECTL_LOGGER).setLevel(level)
