"""Upstream Reshaping — explicit validation of upstream JSON against a declared schema.

Invariants:
    - Pure function: no IO, no async
    - Shape mismatch → UpstreamMalformedResponseError, never an unrelated
      KeyError/TypeError/IndexError deep inside a caller
    - Returned model is fully validated; callers read attributes, not dict keys
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from gateway.core.errors import UpstreamMalformedResponseError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_upstream(model: type[ModelT], data: Any, source: str) -> ModelT:
    """Validate upstream data against model or raise UpstreamMalformedResponseError."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "<root>"
        raise UpstreamMalformedResponseError(
            f"Unexpected response from {source}: {field} {first['msg'].lower()}",
            source,
        ) from e


def first_or_malformed(items: list[ModelT], source: str, what: str) -> ModelT:
    """Return the first item, or raise when the upstream returned none."""
    if not items:
        raise UpstreamMalformedResponseError(
            f"No {what} returned by {source}", source,
        )
    return items[0]
