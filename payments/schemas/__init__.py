"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request JSON, API responses)
    - Instruction text is NOT validated here: the core parser owns its grammar

Design Decisions:
    - Separate from core records: schemas are API contracts, core types are domain
"""
