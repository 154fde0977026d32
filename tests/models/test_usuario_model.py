"""Usuario table definition — column types and constraints."""

import pytest
from sqlalchemy import Text

from crud_usuarios.models.usuario import Usuario


@pytest.mark.parametrize("column", ["nombre", "email", "telefono"])
def test_text_columns_have_no_length_limit(column):
    col_type = Usuario.__table__.c[column].type
    assert isinstance(col_type, Text)
    assert col_type.length is None


def test_email_is_unique():
    assert Usuario.__table__.c.email.unique


def test_edad_range_enforced_by_check_constraint():
    names = {c.name for c in Usuario.__table__.constraints}
    assert "ck_usuarios_edad_rango" in names
