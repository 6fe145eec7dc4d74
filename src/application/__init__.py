"""
Application layer - Use cases and orchestration for the voting booth.

This layer contains:
- Port definitions (abstract interfaces for infrastructure)
- Application services (authentication, session machine, stats, kiosk)

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api
"""
