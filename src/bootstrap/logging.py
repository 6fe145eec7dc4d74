"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import os

from src.infrastructure.observability import configure_structlog as _configure_structlog
from src.infrastructure.observability import get_logger_for_service

ENVIRONMENT_ENV = "BOOTH_ENVIRONMENT"


def configure_structlog(environment: str | None = None, booth_id: str = "") -> None:
    """Configure structlog for the given environment.

    Falls back to ``BOOTH_ENVIRONMENT`` (default: production) when no
    environment is given.
    """
    _configure_structlog(
        environment=environment or os.environ.get(ENVIRONMENT_ENV, "production"),
        booth_id=booth_id,
    )


__all__ = ["configure_structlog", "get_logger_for_service"]
