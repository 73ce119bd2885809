"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas describe the wire format (Spanish keys, accented "teléfono")
    - Required-field policy lives in core/enforce_fields.py, not here
"""
