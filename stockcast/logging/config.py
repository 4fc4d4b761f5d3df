"""
Logging setup for stockcast.

The engines only obtain structlog loggers; embedding applications call
configure_logging once at startup to route events through the standard
library and pick a renderer.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor

# Applied to every event before the optional extras and the renderer
BASE_PROCESSORS: tuple[Processor, ...] = (
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
)


def build_processors(
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> list[Processor]:
    """
    Assemble the processor chain used by configure_logging.

    The renderer is always last.
    """
    processors = list(BASE_PROCESSORS)

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    processors.extend(extra_processors or [])

    renderer: Processor = (
        structlog.processors.JSONRenderer() if format_json
        else structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    )
    processors.append(renderer)
    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Route stockcast events through structlog and the standard library.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Emit one JSON object per event instead of console lines
        include_timestamp: Add an ISO timestamp to each event
        include_caller: Add filename and line number to each event
        extra_processors: Processors inserted just before the renderer
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stdout,
        format="%(message)s",
    )

    structlog.configure(
        processors=build_processors(format_json, include_timestamp, include_caller, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Structlog logger for a module (pass __name__)."""
    return structlog.get_logger(name)


def get_engine_logger(name: str, subsystem: str) -> FilteringBoundLogger:
    """
    Get a logger bound to one of the computation subsystems.

    Args:
        name: Logger name (typically __name__)
        subsystem: "indicators", "forecast" or "analysis"

    Returns:
        Structlog logger with the subsystem bound as context
    """
    return get_logger(name).bind(subsystem=subsystem)


def log_computation(
    logger: FilteringBoundLogger,
    operation: str,
    bar_count: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed engine computation with standardized fields.

    Args:
        logger: Structlog logger instance
        operation: Name of the computation (e.g. "compute_indicators")
        bar_count: Number of input bars
        context: Additional context data
    """
    bound_logger = logger.bind(operation=operation, bar_count=bar_count)

    if context:
        bound_logger = bound_logger.bind(**context)

    bound_logger.debug("Computation complete")
