"""Usuario Validation — pure input checks for ids and request payloads.

Invariants:
    - No IO: every function takes plain values and either returns or raises InvalidInputError
    - Checks run in a fixed order so the first reported problem is deterministic
    - Returned dicts map column name → value and contain only columns to write

Design Decisions:
    - Validation outside Pydantic: update must report a missing row (404) before
      complaining about the payload, so payload checks run after the lookup
    - Email pattern matched with fullmatch: a trailing newline is not a valid address
"""

import re
from typing import Any

from crud_usuarios.core.errors import InvalidInputError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
ID_PATTERN = re.compile(r"[+-]?[0-9]+")
EDAD_MIN = 0
EDAD_MAX = 120
UPDATABLE_FIELDS = ("nombre", "email", "edad", "telefono")


def parse_usuario_id(raw: str) -> int:
    """Parse a path id. Anything but an integer literal is rejected."""
    text = raw.strip()
    if not ID_PATTERN.fullmatch(text):
        raise InvalidInputError("ID debe ser un número válido", field="id")
    return int(text)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def check_email_format(email: Any) -> None:
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        raise InvalidInputError(
            "Email debe tener un formato válido", field="email",
        )


def normalize_edad(value: Any) -> int | None:
    """Coerce an age to int, or None when absent.

    Accepts JSON integers, integral floats (30.0) and digit strings ("30").
    Booleans are not ages.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        edad = None
    elif isinstance(value, int):
        edad = value
    elif isinstance(value, float) and value.is_integer():
        edad = int(value)
    elif isinstance(value, str) and ID_PATTERN.fullmatch(value.strip()):
        edad = int(value.strip())
    else:
        edad = None
    if edad is None or not EDAD_MIN <= edad <= EDAD_MAX:
        raise InvalidInputError(
            f"Edad debe ser un número entre {EDAD_MIN} y {EDAD_MAX}",
            field="edad",
        )
    return edad


def _optional_text(value: Any) -> str | None:
    return value if value else None


def validate_new_usuario(payload: dict[str, Any]) -> dict[str, Any]:
    """Validate a create payload and return the row to insert."""
    nombre = payload.get("nombre")
    email = payload.get("email")
    if _is_blank(nombre) or _is_blank(email):
        raise InvalidInputError("Nombre y email son obligatorios")
    check_email_format(email)
    edad = normalize_edad(payload.get("edad"))
    return {
        "nombre": nombre,
        "email": email,
        "edad": edad,
        "telefono": _optional_text(payload.get("telefono")),
    }


def build_changes(supplied: dict[str, Any]) -> dict[str, Any]:
    """Validate a partial update and return only the columns to change.

    `supplied` holds exactly the fields present in the request body; an
    explicit null clears edad/telefono but is rejected for nombre/email.
    """
    changes: dict[str, Any] = {}
    if "email" in supplied:
        check_email_format(supplied["email"])
        changes["email"] = supplied["email"]
    if "nombre" in supplied:
        if _is_blank(supplied["nombre"]):
            raise InvalidInputError(
                "Nombre no puede estar vacío", field="nombre",
            )
        changes["nombre"] = supplied["nombre"]
    if "edad" in supplied:
        changes["edad"] = normalize_edad(supplied["edad"])
    if "telefono" in supplied:
        changes["telefono"] = _optional_text(supplied["telefono"])
    if not changes:
        raise InvalidInputError(
            "Debe proporcionar al menos un campo para actualizar",
        )
    return changes
