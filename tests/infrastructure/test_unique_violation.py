"""Tests for is_unique_violation — recognizing duplicate-key errors across drivers."""

from sqlalchemy.exc import IntegrityError

from crud_usuarios.infrastructure.database import is_unique_violation


class _PgError(Exception):
    def __init__(self, message, sqlstate):
        super().__init__(message)
        self.sqlstate = sqlstate


class _AdaptedError(Exception):
    """Stands in for a DBAPI adapter error wrapping the driver exception."""


def _integrity(orig):
    return IntegrityError("INSERT INTO usuarios ...", {}, orig)


def test_postgres_unique_sqlstate():
    assert is_unique_violation(_integrity(_PgError("duplicate key", "23505")))


def test_postgres_other_integrity_sqlstate():
    assert not is_unique_violation(_integrity(_PgError("not null", "23502")))


def test_sqlstate_read_from_wrapped_cause():
    adapted = _AdaptedError("duplicate key value violates unique constraint")
    adapted.__cause__ = _PgError("duplicate key", "23505")
    assert is_unique_violation(_integrity(adapted))


def test_sqlite_unique_message():
    orig = Exception("UNIQUE constraint failed: usuarios.email")
    assert is_unique_violation(_integrity(orig))


def test_sqlite_check_constraint_is_not_unique():
    orig = Exception("CHECK constraint failed: ck_usuarios_edad_rango")
    assert not is_unique_violation(_integrity(orig))
