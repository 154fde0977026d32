"""Usuario Repository — every SQL statement the API runs against the usuarios table.

Invariants:
    - Statements are built with SQLAlchemy expressions; values always travel as bound parameters
    - Each write commits exactly once; a failed commit is rolled back before raising
    - A unique violation on commit becomes EmailDuplicadoError, anything else propagates
    - Ids outside the INTEGER column range are reported as missing without a query

Design Decisions:
    - Partial update goes through the ORM unit of work: only attributes set from the
      change mapping are written, so omitted columns keep their stored value
    - get(for_update=True) locks the row so check-then-update runs in one transaction
"""

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crud_usuarios.core.errors import EmailDuplicadoError
from crud_usuarios.infrastructure.database import is_unique_violation
from crud_usuarios.models.usuario import Usuario

logger = logging.getLogger(__name__)

INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


class UsuarioRepository:
    """SQL access for usuarios, bound to one request's session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Usuario]:
        result = await self._db.execute(
            select(Usuario).order_by(Usuario.id.asc()),
        )
        return list(result.scalars().all())

    async def get(
        self, usuario_id: int, for_update: bool = False,
    ) -> Usuario | None:
        if not INT4_MIN <= usuario_id <= INT4_MAX:
            return None
        query = select(Usuario).where(Usuario.id == usuario_id)
        if for_update:
            query = query.with_for_update()
        result = await self._db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, values: dict) -> Usuario:
        usuario = Usuario(**values)
        self._db.add(usuario)
        await self._commit(values.get("email"))
        await self._db.refresh(usuario)
        return usuario

    async def update(self, usuario: Usuario, changes: dict) -> Usuario:
        """Apply a column → value mapping to a loaded row and commit."""
        for column, value in changes.items():
            setattr(usuario, column, value)
        await self._commit(changes.get("email"))
        await self._db.refresh(usuario)
        return usuario

    async def delete(self, usuario_id: int) -> Usuario | None:
        """Delete a row; returns the detached row (still readable), or None."""
        usuario = await self.get(usuario_id, for_update=True)
        if usuario is None:
            return None
        await self._db.delete(usuario)
        await self._db.commit()
        return usuario

    async def search(self, termino: str) -> list[Usuario]:
        """Case-insensitive substring match on nombre or email.

        Wildcards in the term are escaped, so "%" matches a literal percent sign.
        """
        query = (
            select(Usuario)
            .where(or_(
                Usuario.nombre.icontains(termino, autoescape=True),
                Usuario.email.icontains(termino, autoescape=True),
            ))
            .order_by(Usuario.id.asc())
        )
        result = await self._db.execute(query)
        return list(result.scalars().all())

    async def _commit(self, email: str | None) -> None:
        try:
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            if is_unique_violation(e):
                logger.warning(
                    "Duplicate email rejected",
                    extra={"error_code": "EMAIL_CONFLICT"},
                )
                raise EmailDuplicadoError(email) from e
            raise
