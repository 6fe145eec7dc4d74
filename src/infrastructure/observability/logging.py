"""Structured logging configuration with structlog.

Centralized structlog configuration for the booth, supporting production
(JSON) and development (console) output.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "warning",
        "event": "duplicate_vote_attempt_detected",
        "correlation_id": "uuid",
        "booth_id": "247-A",
        ...additional context
    }

Severity conventions used across the booth:
- info: normal transitions (scan started, ballot opened, vote cast)
- warning: failed or duplicate authentication attempts
- error: biometric provider infrastructure failures
- critical: a vote rejected because the voter was already marked

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production", booth_id="247-A")

    import structlog
    log = structlog.get_logger()
    log.info("event_name", key="value")
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.correlation import correlation_id_processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Get the configured log level from environment."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def _booth_id_processor(booth_id: str) -> Processor:
    """Build a processor that stamps the booth id on every entry."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("booth_id", booth_id)
        return event_dict

    return cast(Processor, processor)


def configure_structlog(environment: str = "production", booth_id: str = "") -> None:
    """Configure structlog for the booth.

    Should be called once at startup.

    Args:
        environment: 'production' for JSON output, 'development' for console.
        booth_id: Stamped on every log entry when non-empty.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if booth_id:
        shared_processors.append(_booth_id_processor(booth_id))

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "booth"
) -> structlog.BoundLogger:
    """Get a logger with service name and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "booth").
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
