"""
Integration test configuration for the booth.

Integration tests drive the fully wired kiosk through
``tests.helpers.make_booth``: session machine, authentication engine,
provider, registry, ledger and counters are the production ones, and
only the biometric source, resolution policy and clock are scripted.

Usage:
    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_example(booth: BoothHarness) -> None:
        booth.scanner.queue(ScriptStep.match("tpl-V1"))
        result = await booth.kiosk.start_scan()
"""

import pytest

from tests.helpers import BoothHarness, make_booth


@pytest.fixture
def booth() -> BoothHarness:
    """A booth where nobody has voted yet."""
    return make_booth()
