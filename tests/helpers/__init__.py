"""Test helpers for booth tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    BiasedDuplicateResolver: Resolution strategy that favors repeat voters
    BoothHarness / make_booth: Deterministically wired kiosk

Usage:
    from tests.helpers import FakeTimeAuthority
"""

from tests.helpers.biased_duplicate_resolver import BiasedDuplicateResolver
from tests.helpers.booth_harness import BoothHarness, make_booth
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["BiasedDuplicateResolver", "BoothHarness", "FakeTimeAuthority", "make_booth"]
