"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain validation logic (delegated to api/dependencies.py and core/)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
