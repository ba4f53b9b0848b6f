"""Infrastructure Layer: database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store exceptions mapped to core/errors.py types
"""
