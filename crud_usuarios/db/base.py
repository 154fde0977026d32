"""SQLAlchemy Declarative Base — shared base class for ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single source of truth for table definitions (alembic, tests)

Design Decisions:
    - Separate file for Base: models and alembic import it without importing the engine
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass
