"""Usuario ORM — the single persisted entity.

Invariants:
    - id is an integer primary key assigned by the database, never updated
    - email is unique (constraint enforced by the database, surfaced as 409)
    - edad, when set, lies in [0, 120] (CHECK constraint mirrors the API validation)
    - nombre, email and telefono are unbounded TEXT: no length limit to trip over

Design Decisions:
    - Plain columns, no timestamps or soft-delete flag: delete erases the row
"""

from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from crud_usuarios.db.base import Base


class Usuario(Base):
    """A registered user."""
    __tablename__ = "usuarios"
    __table_args__ = (
        CheckConstraint(
            "edad IS NULL OR (edad >= 0 AND edad <= 120)",
            name="ck_usuarios_edad_rango",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True, index=True,
    )
    edad: Mapped[int | None] = mapped_column(Integer, nullable=True)
    telefono: Mapped[str | None] = mapped_column(Text, nullable=True)
