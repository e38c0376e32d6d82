"""structlog rendering for the ``typeguards`` logger.

Library modules log through plain ``logging.getLogger(__name__)``; this
module only decides how those records look when an application opts in:

- console (default): structlog's dev renderer on stderr
- JSON: one JSON object per line on stderr

The host application's root logger and handlers are never touched.
"""

from __future__ import annotations

import logging
import sys

import structlog

from typeguards.config.settings import get_settings

LOGGER_NAME = "typeguards"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _resolve_level(verbose: bool | None) -> int:
    section = get_settings().logging
    if verbose is None and section.level is not None:
        return logging.getLevelNamesMapping()[section.level]
    if verbose is None:
        verbose = section.verbose
    return logging.DEBUG if verbose else logging.WARNING


def configure_logging(
    *,
    verbose: bool | None = None,
    log_json: bool | None = None,
) -> logging.Logger:
    """Attach a structlog-formatted stderr handler to the ``typeguards`` logger.

    Calling it again replaces the previous handler.

    Args:
        verbose: DEBUG when True, WARNING+ when False. When omitted, the
            ``[logging]`` settings decide (an explicit ``level`` first).
        log_json: Use the JSON renderer. Defaults to ``logging.json_output``.
    """
    if log_json is None:
        log_json = get_settings().logging.json_output

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(verbose))
    logger.propagate = False
    return logger
