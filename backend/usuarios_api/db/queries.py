"""Statement Builders — SQLAlchemy Core statements for the usuarios table.

Invariants:
    - User input only ever enters statements as bound parameters
    - Column names equal wire keys, so result rows are keyed like the API
    - Search starts from an always-true predicate and ANDs one clause per
      present filter; absent or empty filters add nothing
    - Search is case-insensitive; "%" and "_" in filter values match literally
    - Listings are ordered by id
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Delete, Insert, Select, Update, delete, insert, select, true, update

from usuarios_api.core.domain_types import REQUIRED_FIELDS, SearchFilter
from usuarios_api.models.usuario import Usuario

usuarios = Usuario.__table__

PUBLIC_COLUMNS = [usuarios.c.id] + [usuarios.c[field.value] for field in REQUIRED_FIELDS]


def select_all() -> Select:
    return select(*PUBLIC_COLUMNS).order_by(usuarios.c.id)


def select_filtered(filters: Mapping[str, str | None]) -> Select:
    """Partial-match search over nombre/correo/profesional."""
    stmt = select(*PUBLIC_COLUMNS).where(true())
    for search_filter in SearchFilter:
        value = filters.get(search_filter.value)
        if value:
            stmt = stmt.where(
                usuarios.c[search_filter.value].icontains(value, autoescape=True),
            )
    return stmt.order_by(usuarios.c.id)


def select_id(record_id: int) -> Select:
    return select(usuarios.c.id).where(usuarios.c.id == record_id)


def insert_usuario(values: Mapping[str, Any]) -> Insert:
    return insert(usuarios).values(_record_values(values))


def update_usuario(record_id: int, values: Mapping[str, Any]) -> Update:
    """Full replace: every business column is overwritten."""
    return (
        update(usuarios)
        .where(usuarios.c.id == record_id)
        .values(_record_values(values))
    )


def delete_usuario(record_id: int) -> Delete:
    return delete(usuarios).where(usuarios.c.id == record_id)


def _record_values(values: Mapping[str, Any]) -> dict[str, Any]:
    return {field.value: values[field.value] for field in REQUIRED_FIELDS}
