"""Configuration module for the booth.

Available Configurations:
- BoothConfig: Per-booth timing, simulation and identity settings
- DEMO_VOTERS / DEMO_CANDIDATES: Demonstration roster
"""

from src.config.booth_config import (
    DEFAULT_BOOTH_CONFIG,
    TEST_BOOTH_CONFIG,
    BoothConfig,
)
from src.config.demo_roster import DEMO_CANDIDATES, DEMO_VOTERS

__all__ = [
    "BoothConfig",
    "DEFAULT_BOOTH_CONFIG",
    "TEST_BOOTH_CONFIG",
    "DEMO_CANDIDATES",
    "DEMO_VOTERS",
]
