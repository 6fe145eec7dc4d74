"""
Biometric Voting Booth - single-booth kiosk core.

Authenticates a voter through a biometric challenge, prevents double
voting, and records exactly one vote per verified voter.

Layers:
- domain: models, errors (no src imports)
- application: ports and services (booth state machine, engine, stats)
- infrastructure: in-memory stubs, biometric adapter, observability
- api: FastAPI routes for the kiosk front end
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
