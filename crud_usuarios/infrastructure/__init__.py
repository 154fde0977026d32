"""Infrastructure Layer — database engine, repositories and logging setup.

Invariants:
    - Only this layer (and api/ dependencies) touches SQLAlchemy sessions
    - Storage errors with an API meaning are translated to core/errors.py types here
"""
