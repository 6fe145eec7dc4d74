"""Health check response models."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model.

    Attributes:
        status: Health status string (e.g., "healthy").
        booth_id: Booth served by this process.
        session_phase: Phase of the current booth session.
    """

    status: str
    booth_id: str = Field(default="", description="Booth served by this process")
    session_phase: str | None = Field(
        default=None, description="Phase of the current booth session"
    )
