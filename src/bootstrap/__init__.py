"""Composition root for wiring the booth.

This package centralizes infrastructure-aware wiring so API and application
layers can depend on ports without importing infrastructure directly.
``src.bootstrap.booth`` owns the process booth kiosk.
"""
