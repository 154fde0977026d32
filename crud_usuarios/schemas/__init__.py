"""Pydantic Schemas — request/response shapes for the usuarios API.

Invariants:
    - Schemas check types at the boundary; business rules live in core/validate_usuario.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
