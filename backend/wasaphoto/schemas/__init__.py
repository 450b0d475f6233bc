"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Response keys are camelCase (aliases); Python attributes stay snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - from_record/from_view constructors: routes never hand-build dicts
"""
