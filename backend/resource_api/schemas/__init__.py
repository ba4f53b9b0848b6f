"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, API responses)
    - Response field names are camelCase on the wire

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
