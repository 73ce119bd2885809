"""Functional Core — pure domain logic for the usuarios resource.

Invariants:
    - No IO, no async, no DB access anywhere in this package
    - Violations are returned as error values, not raised

Design Decisions:
    - Shell (services/, api/) orchestrates IO around these pure functions
"""
