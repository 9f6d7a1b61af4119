"""Services Layer — capability callers, the route table and the proxy pipeline.

Invariants:
    - Callers take (params, upstreams) and return Success or raise
    - Only proxy_pipeline converts exceptions into Failure
"""
