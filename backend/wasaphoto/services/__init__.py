"""Services Layer — access guard, relationship policy, photo interactions, feed views.

Invariants:
    - Every service receives its SocialStore at construction (no module-level handle)
    - Services raise core/errors.py types; they never build HTTP responses

Design Decisions:
    - One class per concern, small enough to read in one sitting (ADR: no god objects)
"""
