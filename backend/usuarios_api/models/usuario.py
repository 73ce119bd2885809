"""Usuario ORM — one service-provider listing in the ``usuarios`` table.

Invariants:
    - id is an autoincrement integer primary key, assigned once by the store
    - All 8 business columns are NOT NULL text
    - The phone column is named "teléfono" in the store; the Python attribute is telefono
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from usuarios_api.db.base import Base


class Usuario(Base):
    """Service-provider listing."""
    __tablename__ = "usuarios"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    nombre: Mapped[str] = mapped_column(String(255), nullable=False)
    telefono: Mapped[str] = mapped_column(
        "teléfono", String(50), nullable=False,
    )
    correo: Mapped[str] = mapped_column(String(255), nullable=False)
    profesional: Mapped[str] = mapped_column(String(255), nullable=False)
    mensaje: Mapped[str] = mapped_column(Text, nullable=False)
    disponibilidad: Mapped[str] = mapped_column(String(255), nullable=False)
    tarifa: Mapped[str] = mapped_column(String(100), nullable=False)
    ciudad: Mapped[str] = mapped_column(String(255), nullable=False)
