"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
"""

from crud_usuarios.models.usuario import Usuario  # noqa: F401
