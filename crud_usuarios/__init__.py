"""CRUD de Usuarios — FastAPI service for the usuarios table.

Invariants:
    - Package root has no import side effects (no engine, no app)
"""

__version__ = "1.0.0"
