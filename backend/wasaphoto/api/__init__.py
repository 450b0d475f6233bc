"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every guarded route obtains its caller from dependencies.require_user
    - All endpoints return JSON except photo fetch (raw bytes)

Design Decisions:
    - Thin routes delegate to services; status codes decided here
"""
