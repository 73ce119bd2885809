"""Usuario Schemas — request payload, public record and confirmation bodies.

Invariants:
    - UsuarioPayload accepts every field as optional: presence is enforced by
      core/enforce_fields.py so absent, null and "" share one 400 response
    - Numeric JSON values are coerced to text; booleans are rejected
    - A numeric zero is falsy, so it becomes None and counts as missing
    - "teléfono" is the wire key; "telefono" accepted on input
    - UsuarioRecord has a fixed field set and is built only by to_public_record()
"""

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class UsuarioPayload(BaseModel):
    """Create/update body — full record without id."""
    nombre: str | None = Field(None, examples=["Juan Pérez"])
    telefono: str | None = Field(
        None, alias="teléfono",
        validation_alias=AliasChoices("teléfono", "telefono"),
        examples=["600123456"],
    )
    correo: str | None = Field(None, examples=["juan.perez@gmail.com"])
    profesional: str | None = Field(None, examples=["electricista"])
    mensaje: str | None = Field(None, examples=["Instalar enchufes en la cocina"])
    disponibilidad: str | None = Field(None, examples=["Mañanas"])
    tarifa: str | None = Field(None, examples=["25"])
    ciudad: str | None = Field(None, examples=["Madrid"])

    @field_validator("*", mode="before")
    @classmethod
    def coerce_numbers(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v) if v else None
        return v

    def as_fields(self) -> dict[str, str | None]:
        """Values keyed by wire key (= column name)."""
        return self.model_dump(by_alias=True)


class UsuarioRecord(BaseModel):
    """Public shape of one usuario."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(examples=[1])
    nombre: str = Field(examples=["David Moreno"])
    telefono: str = Field(alias="teléfono", examples=["646765434"])
    correo: str = Field(examples=["jam333@hotmail.com"])
    profesional: str = Field(examples=["pintor"])
    mensaje: str = Field(examples=["Cambiar color de las paredes"])
    disponibilidad: str = Field(examples=["Tardes"])
    tarifa: str = Field(examples=["20"])
    ciudad: str = Field(examples=["Sevilla"])


def to_public_record(row: Mapping[str, Any]) -> UsuarioRecord:
    """Map one result row (keyed by column name) to the public record."""
    return UsuarioRecord(
        id=row["id"],
        nombre=row["nombre"],
        telefono=row["teléfono"],
        correo=row["correo"],
        profesional=row["profesional"],
        mensaje=row["mensaje"],
        disponibilidad=row["disponibilidad"],
        tarifa=row["tarifa"],
        ciudad=row["ciudad"],
    )


class UsuarioCreated(BaseModel):
    """201 body for a created record."""
    mensaje: str = Field(examples=["Usuario creado correctamente"])
    id: int = Field(examples=[4])


class Confirmation(BaseModel):
    """200 body for update/delete."""
    mensaje: str = Field(examples=["Usuario actualizado correctamente"])
