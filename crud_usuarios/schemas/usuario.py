"""Usuario Schemas — request bodies and the serialized row.

Invariants:
    - Text fields must be JSON strings (or null); routes validate after the id and row checks
    - edad is accepted as-is (Any) and normalized by core/validate_usuario.py
    - UsuarioUpdate.model_fields_set tells which fields the client actually sent

Design Decisions:
    - No required fields here: "nombre y email son obligatorios" is reported by the
      handler with the API's own message and check order
    - Unknown keys ignored, matching a tolerant JSON API
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class UsuarioCreate(BaseModel):
    """Create payload — nombre and email required by validation, not by the schema."""
    model_config = ConfigDict(extra="ignore")

    nombre: str | None = None
    email: str | None = None
    edad: Any = None
    telefono: str | None = None


class UsuarioUpdate(BaseModel):
    """Partial update payload — any subset of the writable fields."""
    model_config = ConfigDict(extra="ignore")

    nombre: str | None = None
    email: str | None = None
    edad: Any = None
    telefono: str | None = None

    def supplied(self) -> dict[str, Any]:
        """Only the fields present in the request body, nulls included."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class UsuarioResponse(BaseModel):
    """Public-facing row."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    email: str
    edad: int | None = None
    telefono: str | None = None
