"""
Centralized logging configuration for synthdata.

All progress reporting goes through structlog on top of the standard
library logging module, so output can be switched between a console
renderer and JSON lines without touching the generators.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Progress goes to stderr so stdout stays free for piping
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_generator_logger(name: str, dataset: str) -> FilteringBoundLogger:
    """
    Get a logger bound to one dataset's generation run.

    Args:
        name: Logger name (typically __name__)
        dataset: Dataset name included with every event

    Returns:
        Configured structlog logger for generator progress
    """
    return get_logger(name).bind(
        subsystem="generator",
        dataset=dataset
    )


def log_contract_generated(
    logger: FilteringBoundLogger,
    symbol: str,
    start: Any,
    expiry: Any,
    rows: int,
    output_path: str
) -> None:
    """
    Log completion of one contract with standardized fields.

    Args:
        logger: Structlog logger instance
        symbol: Contract symbol
        start: Contract window start
        expiry: Contract window end
        rows: Number of bars written
        output_path: File the bars were written to
    """
    logger.info(
        "contract_generated",
        symbol=symbol,
        start=str(start),
        expiry=str(expiry),
        rows=rows,
        output_path=output_path
    )
