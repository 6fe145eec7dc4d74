"""
Infrastructure layer - External adapters for the voting booth.

This layer contains:
- Biometric provider adapter over pluggable challenge sources
- System time authority
- In-memory stubs for registry, ledger, alerts and resolution
- structlog observability setup

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
