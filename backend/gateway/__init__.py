"""Rebix Gateway — outbound-proxy gateway over third-party APIs and libraries.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
