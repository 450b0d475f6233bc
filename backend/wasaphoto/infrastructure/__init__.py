"""Infrastructure Layer — persistence and cross-cutting concerns.

Invariants:
    - Infrastructure implements core/ contracts (SocialStore) but holds no business rules
    - All SQLAlchemy failures mapped to core/errors.py types before leaving this layer

Design Decisions:
    - Store as a class over an AsyncSession, one instance per request (ADR: no global handle)
"""
