"""structlog configuration for displaykit.

All displaykit modules log through stdlib ``logging.getLogger(__name__)``;
records are rendered by a structlog ProcessorFormatter on stderr:

- Human (default): console renderer, no timestamps, colors only on a TTY
  and never when ``NO_COLOR`` is set
- JSON (--log-json): one JSON object per line with an ISO timestamp

Every record carries the running CLI ``command`` once it is bound.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

LOGGER_NAME = "displaykit"
QUIET_LOGGERS = ("pluggy",)


def log_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """Level for displaykit loggers: verbose wins over quiet."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def use_colors() -> bool:
    return sys.stderr.isatty() and not os.environ.get("NO_COLOR")


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    command: str | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: DEBUG output from displaykit loggers.
        quiet: Hide provider-failure warnings; only ERROR+ is shown.
        log_json: Use JSON renderer instead of console renderer.
        command: CLI command name bound to every record.
    """
    level = log_level(verbose=verbose, quiet=quiet)

    structlog.contextvars.clear_contextvars()
    if command:
        structlog.contextvars.bind_contextvars(command=command)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]

    renderer: structlog.types.Processor
    if log_json:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso"))
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=use_colors())
    shared_processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
