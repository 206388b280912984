"""structlog configuration for groupieTracker.

Events are snake_case names with key/value context, e.g.
``snapshot_loaded artists=52 relations=52``.  Development runs print them
through ``ConsoleRenderer``; with ``APP_ENV=production`` each event becomes
one JSON line for the log shipper.

uvicorn and httpx log through the stdlib, so the root logger gets a
``ProcessorFormatter`` built from the same chain and renderer.
"""

import logging
import os
import sys

import structlog


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors common to structlog events and bridged stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def _select_renderer(json_output: bool) -> structlog.types.Processor:
    if json_output or os.environ.get("APP_ENV", "development") == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def _route_stdlib_logging(
    processors: list[structlog.types.Processor],
    renderer: structlog.types.Processor,
    level: str,
) -> None:
    """Replace the root logger's handlers with one structlog-formatted handler."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *processors,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> structlog.BoundLogger:
    """Install the structlog pipeline and route stdlib logging through it.

    ``main.py`` calls this once at import time with the level from
    ``Settings.log_level``; JSON output is chosen when *json_output* is set
    or ``APP_ENV`` is ``production``.  Events below *log_level* are dropped
    by the bound logger before any processor runs.
    """
    level = log_level.upper()
    processors = _shared_processors()
    renderer = _select_renderer(json_output)

    structlog.configure(
        processors=[*processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _route_stdlib_logging(processors, renderer, level)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Logger bound with ``logger_name=name``; configures defaults on first use."""
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
