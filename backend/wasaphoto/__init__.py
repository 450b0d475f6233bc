"""WASAPhoto Application Package — photo-sharing backend with a social-graph visibility engine.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
