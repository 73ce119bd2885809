"""Required-Field Enforcement — presence check for create and update payloads.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - A field is missing when its value is falsy: absent, None or ""
    - Whitespace-only text is present
    - Return MissingFieldsError on violation, None on success
    - Format of values (email, phone, rate) is not checked

Design Decisions:
    - Return errors (not raise): services chain checks and hand the variant to the route
"""

from collections.abc import Mapping
from typing import Any

from usuarios_api.core.domain_types import REQUIRED_FIELDS
from usuarios_api.core.errors import MissingFieldsError


def is_present(value: Any) -> bool:
    """Truthiness rule for required fields."""
    return bool(value)


def find_missing_fields(payload: Mapping[str, Any]) -> list[str]:
    """Wire keys of required fields that are missing, in field order."""
    return [
        field.value for field in REQUIRED_FIELDS
        if not is_present(payload.get(field.value))
    ]


def check_required_fields(payload: Mapping[str, Any]) -> MissingFieldsError | None:
    """All 8 business fields must be present. Returns error or None."""
    missing = find_missing_fields(payload)
    if missing:
        return MissingFieldsError(missing)
    return None
