"""Request Adapter — validates raw query parameters against a route schema.

Invariants:
    - Pure function: no IO, no async
    - First missing required key (schema declaration order) is reported
    - Empty or whitespace-only values count as missing for required keys
    - Absent optional keys get their default; absent keys without default are omitted
    - Unknown extra query keys are dropped, never forwarded upstream
    - No type coercion — values pass through as strings
"""

from typing import Mapping

from gateway.core.domain_types import ParamSpec, ProxyRequest
from gateway.core.errors import MissingParameterError


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def build_proxy_request(
    path: str,
    schema: Mapping[str, ParamSpec],
    raw_query: Mapping[str, str],
) -> ProxyRequest:
    """Build a validated ProxyRequest or raise MissingParameterError."""
    params: dict[str, str] = {}
    for name, spec in schema.items():
        value = raw_query.get(name)
        if spec.required:
            if _is_blank(value):
                raise MissingParameterError(name)
            params[name] = value
        elif value is not None:
            params[name] = value
        elif spec.default is not None:
            params[name] = spec.default
    return ProxyRequest(path=path, params=params)
