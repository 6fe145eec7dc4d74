"""
API routes for the booth.

This module contains all FastAPI router definitions.

Available routers:
- health: Health check endpoints
- booth: Kiosk session, ballot, stats and alert endpoints
"""

from src.api.routes.booth import router as booth_router
from src.api.routes.health import router as health_router

__all__: list[str] = ["booth_router", "health_router"]
