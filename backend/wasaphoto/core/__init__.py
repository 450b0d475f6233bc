"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - repository_protocols.py only declares the Store contract; it does no IO itself

Design Decisions:
    - Functional core separated from imperative shell (ADR: rules testable without a Store)
"""
