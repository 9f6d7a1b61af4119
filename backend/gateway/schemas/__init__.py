"""Pydantic Schemas — declared shapes of upstream responses.

Invariants:
    - Schemas validate at the upstream boundary, before any reshaping
"""
