"""Database Schema — SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - Importing this package never creates an engine or opens a connection
"""
