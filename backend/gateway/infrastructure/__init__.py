"""Infrastructure Layer — upstream clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every outbound call maps failures onto the core error hierarchy
"""
