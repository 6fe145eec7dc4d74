"""Health check endpoint for the booth API."""

from fastapi import APIRouter, Depends

from src.api.dependencies.booth import get_booth_kiosk_service
from src.api.models.health import HealthResponse
from src.application.services.booth_kiosk_service import BoothKioskService

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    kiosk: BoothKioskService = Depends(get_booth_kiosk_service),
) -> HealthResponse:
    """Return health status.

    Returns:
        Health status with 200 OK, plus the booth id and session phase.
    """
    return HealthResponse(
        status="healthy",
        booth_id=kiosk.booth_id,
        session_phase=kiosk.get_state().phase.value,
    )
