"""
structlog setup for the query runner.

Everything is routed through the standard ``logging`` module and written to
stderr. Stdout is reserved for the rendered result set, so a report piped
into ``jq`` or a file never picks up log lines.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

# Enrichment applied to every event before the optional extras and renderer.
_BASE_PROCESSORS: tuple = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
)

_CALLSITE_FIELDS = (
    structlog.processors.CallsiteParameter.FILENAME,
    structlog.processors.CallsiteParameter.LINENO,
)


def _build_processors(
    format_json: bool,
    include_timestamp: bool,
    include_caller: bool
) -> list[Processor]:
    processors: list[Processor] = list(_BASE_PROCESSORS)
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(parameters=_CALLSITE_FIELDS))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Colour only when a person is watching stderr.
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False
) -> None:
    """
    Route runner logs to stderr at ``level``.

    Safe to call more than once (the CLI does so per invocation); earlier
    handlers are replaced. ``format_json`` switches from the console renderer
    to one JSON object per line, for runs collected by a log shipper.
    """
    logging.basicConfig(
        level=logging.getLevelName(level.upper()),
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )
    structlog.configure(
        processors=_build_processors(format_json, include_timestamp, include_caller),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Module logger; pass ``__name__``."""
    return structlog.get_logger(name)


def get_adapter_logger(name: str, service: str) -> FilteringBoundLogger:
    """Logger whose events all carry the backend ``service`` they talk to."""
    return get_logger(name).bind(subsystem="adapter", service=service)


def log_query_outcome(
    logger: FilteringBoundLogger,
    outcome: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Emit one event for a finished template entry.

    Successes log at info with the number of items returned (None when the
    data is not a list). Failures log at warning with the captured message.
    """
    bound_logger = logger.bind(
        service=outcome.service,
        query=outcome.template,
        outcome=outcome.status.value,
    )
    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome.success:
        bound_logger.info("Query succeeded", items=_count_items(outcome.data))
    else:
        bound_logger.warning("Query failed", error=outcome.error)


def _count_items(data: Any) -> Optional[int]:
    return len(data) if isinstance(data, list) else None
