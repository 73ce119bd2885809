"""Service Layer — resource handlers for the usuarios table.

Invariants:
    - Handlers return Outcome values; storage errors never escape as exceptions
"""
