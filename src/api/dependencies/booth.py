"""Booth API dependencies.

Dependency injection for the kiosk routes. The kiosk itself is owned by
the composition root; tests replace it through
``app.dependency_overrides[get_booth_kiosk_service]``.
"""

from src.application.services.booth_kiosk_service import BoothKioskService
from src.bootstrap.booth import get_booth_kiosk


def get_booth_kiosk_service() -> BoothKioskService:
    """Get the booth kiosk service for the current process."""
    return get_booth_kiosk()
