"""structlog configuration for dnsnames.

Two output modes, both on stderr so piped command output stays clean:
- Human (default): colored console output when stderr is a TTY
- JSON (--log-json): one structured JSON object per line

Names and patterns in event fields are logged in their text form.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from dnsnames.domain.names import (
    DomainName,
    FullyQualifiedDomainName,
    PartiallyQualifiedDomainName,
)
from dnsnames.domain.pattern import Pattern, PatternSegment
from dnsnames.domain.segment import Segment

PACKAGE_LOGGER = "dnsnames"

_TEXT_TYPES = (
    Segment,
    PatternSegment,
    FullyQualifiedDomainName,
    PartiallyQualifiedDomainName,
    DomainName,
    Pattern,
)


def render_names(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: replace name and pattern values with their text."""
    for key, value in event_dict.items():
        if isinstance(value, _TEXT_TYPES):
            event_dict[key] = str(value)
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and route everything through stdlib.

    Args:
        verbose: Let ``dnsnames.*`` loggers emit DEBUG. Otherwise WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        render_names,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
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

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
