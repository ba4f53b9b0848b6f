"""Resource API: CRUD service over a single Resource entity, plus summation helpers.

Invariants:
    - Package root contains no executable code besides the version constant
"""

__version__ = "1.0.0"
