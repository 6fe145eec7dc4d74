"""
API layer - FastAPI routes and HTTP concerns for the booth kiosk.

This layer contains:
- FastAPI route definitions
- Request/Response DTOs
- HTTP middleware

IMPORT RULES:
- CAN import from: application, domain
- CANNOT import from: infrastructure directly
- Reaches infrastructure only through the bootstrap composition root
"""

__all__: list[str] = []
