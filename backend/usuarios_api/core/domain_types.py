"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UsuarioId wraps the server-generated integer identifier
    - UsuarioField enumerates the 8 business fields in wire order; the set is fixed
    - Field values are the wire keys (Spanish, "teléfono" accented)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: members serialize to JSON and compare equal to their wire key
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UsuarioId = NewType("UsuarioId", int)

# Ids are assigned from 1 by the store; the column is a 32-bit INTEGER
USUARIO_ID_MIN = 1
USUARIO_ID_MAX = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class UsuarioField(str, Enum):
    """The 8 required business fields of a usuario record."""
    NOMBRE = "nombre"
    TELEFONO = "teléfono"
    CORREO = "correo"
    PROFESIONAL = "profesional"
    MENSAJE = "mensaje"
    DISPONIBILIDAD = "disponibilidad"
    TARIFA = "tarifa"
    CIUDAD = "ciudad"


class SearchFilter(str, Enum):
    """Query parameters accepted by the search endpoint."""
    NOMBRE = "nombre"
    CORREO = "correo"
    PROFESIONAL = "profesional"


REQUIRED_FIELDS: tuple[UsuarioField, ...] = tuple(UsuarioField)


# ─── Confirmation messages ───────────────────────────────────────

MSG_CREATED = "Usuario creado correctamente"
MSG_UPDATED = "Usuario actualizado correctamente"
MSG_DELETED = "Usuario eliminado correctamente"
