"""Startup hooks for the booth API.

This module provides startup hooks that:
1. Configure structured logging
2. Build the booth kiosk so invalid configuration or a bad roster fails
   the process before it serves a single request

Usage in FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        initialize_booth()
        yield

Usage standalone:
    configure_logging()
    initialize_booth()
"""

import os

from structlog import get_logger

from src.bootstrap.booth import get_booth_kiosk
from src.bootstrap.logging import configure_structlog
from src.domain.exceptions import BoothError

# Environment variable for environment detection
ENVIRONMENT_VAR = "ENVIRONMENT"
DEFAULT_ENVIRONMENT = "development"

# Booth id for log stamping (same variable BoothConfig reads)
BOOTH_ID_VAR = "BOOTH_ID"

logger = get_logger()


def configure_logging() -> None:
    """Configure structured logging for the application.

    This function configures structlog based on the ENVIRONMENT variable:
    - production: JSON output for log aggregation
    - development (default): Colored console output

    Should be called first in the startup sequence, before any logging occurs.
    """
    environment = os.getenv(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)
    configure_structlog(environment=environment, booth_id=os.getenv(BOOTH_ID_VAR, ""))

    log = get_logger().bind(component="startup_logging")
    log.info("structured_logging_configured", environment=environment)


def initialize_booth() -> None:
    """Build the process booth kiosk.

    Raises:
        ValueError: The booth configuration is invalid.
        BoothError: The roster has duplicate voter or candidate ids.
    """
    log = logger.bind(component="booth_startup")
    try:
        kiosk = get_booth_kiosk()
    except (ValueError, BoothError) as e:
        log.critical("booth_startup_failed", error=str(e), error_type=type(e).__name__)
        raise

    stats = kiosk.get_stats()
    log.info(
        "booth_ready",
        booth_id=kiosk.booth_id,
        total_registered=stats.total_registered,
        candidates=len(kiosk.get_candidates()),
    )
