"""Error Hierarchy — typed, categorized errors for every failure mode of the API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) never touch storage; storage errors are 500-level
    - to_response() produces the REST envelope {"error": {...}}
    - No driver or SQL details in user-facing messages

Design Decisions:
    - Single hierarchy with UsuariosError base: services return instances as
      Outcome variants, the gate raises AuthError, one global handler covers both
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    record_id: int | None = None
    operation: str | None = None


class UsuariosError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "record_id": self.context.record_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MissingFieldsError(UsuariosError):
    """One or more required record fields are absent, null or empty."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            "Faltan campos obligatorios",
            "MISSING_FIELDS", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.missing = missing

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["missing_fields"] = list(self.missing)
        return response


class AuthError(UsuariosError):
    """Bearer credential absent, malformed or not matching the shared secret.

    One message for every cause so callers cannot tell which check failed.
    """
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Token inválido o faltante",
            "INVALID_TOKEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(UsuariosError):
    """Requested record does not exist."""
    def __init__(self, record_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.record_id = record_id
        super().__init__(
            "Usuario no encontrado",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class InvalidRequestError(UsuariosError):
    """Body or path could not be parsed into the expected shape.

    ``details`` lists one entry per offending location (field, message, type).
    """
    def __init__(
        self, details: list[dict[str, str]], context: ErrorContext | None = None,
    ):
        super().__init__(
            "Datos de la solicitud no válidos",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = list(self.details)
        return response


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(UsuariosError):
    """Database operation failed.

    ``detail`` keeps the driver message for logs; it is not part of the
    response envelope.
    """
    def __init__(
        self, message: str, operation: str,
        detail: str | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Error del servidor: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.detail = detail


class InternalError(UsuariosError):
    """Unexpected failure outside the error hierarchy; carries no detail."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Error del servidor",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
