"""API dependencies for dependency injection."""

from src.api.dependencies.booth import get_booth_kiosk_service

__all__: list[str] = ["get_booth_kiosk_service"]
