"""Pydantic Schemas: request validation and response shaping for API endpoints.

Invariants:
    - Schemas validate at the system boundary (request bodies, response payloads)
    - JSON field names are camelCase; Python attributes stay snake_case
    - Single-object responses carry success=True; list responses are bare arrays

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Response schemas double as the projection: fields not declared never leave the API
"""
