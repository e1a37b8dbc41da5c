"""structlog wiring for manners.

Library modules log through :func:`get_logger`, which routes structlog
events into the stdlib ``manners`` logger tree. Nothing is printed until
:func:`configure_logging` lowers that logger's level, so importing the
library stays silent. The events manners emits carry their data as fields:

- ``coach.compiled`` — ``kind`` (``manner``/``etiquette``), ``members``
- ``cache.miss`` — ``kind`` (coach class), ``cache_size``
- ``cache.cleared`` — ``dropped``
- ``rule_set.loaded`` — ``path``

Two output modes: console rendering (default) or JSON lines (--log-json),
both on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "manners"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger backed by ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route manners events to stderr.

    Args:
        verbose: Show the DEBUG-level compile and cache events.
        log_json: One JSON object per event instead of console lines.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
