"""Services Layer: data-access translation between the API and the ORM.

Invariants:
    - Services receive their AsyncSession from the caller, never create one
    - Services raise core/errors.py types; they never build HTTP responses
"""
