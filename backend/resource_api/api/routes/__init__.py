"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with a relative prefix and tags
    - Routes never contain data access (delegate to services)

Design Decisions:
    - Explicit registration in main.py under the configured API prefix
"""
