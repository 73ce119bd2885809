"""Outcome — explicit success/error variant returned by resource handlers.

Invariants:
    - Exactly one of value/error is meaningful: error is None on success
    - status_code is the HTTP status for the success case; errors carry their own
    - Outcomes are immutable

Design Decisions:
    - Errors travel as values up to the route boundary, which maps
      variant -> status code; exceptions are reserved for the gate and
      unexpected failures
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from usuarios_api.core.errors import UsuariosError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a resource handler."""
    value: T | None = None
    error: UsuariosError | None = None
    status_code: int = 200

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def http_status(self) -> int:
        return self.error.http_status if self.error is not None else self.status_code


def success(value: T, status_code: int = 200) -> Outcome[T]:
    return Outcome(value=value, status_code=status_code)


def failure(error: UsuariosError) -> Outcome:
    return Outcome(error=error)
