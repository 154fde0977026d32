"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routers are registered explicitly in main.py
"""
