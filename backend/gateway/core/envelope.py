"""Response Envelope — pure builders for the fixed client contract.

Invariants:
    - JSON success body: {"status": 200, "creator": <creator>, ...payload} (flat merge)
    - Payload keys "status"/"creator" never override the fixed fields
    - Failure body is always a single-field {"error": message}
    - Failure status is 500, except MISSING_PARAMETER which uses the configured status

Design Decisions:
    - Pure dict/int builders here; HTTP Response objects are assembled in the
      API layer so core stays free of framework imports
"""

from gateway.core.errors import ErrorKind

RESERVED_FIELDS = ("status", "creator")
GENERIC_UPSTREAM_MESSAGE = "Upstream request failed"


def build_success_body(payload: dict, creator: str) -> dict:
    """Merge payload under the fixed identifying fields."""
    body = {"status": 200, "creator": creator}
    for key, value in payload.items():
        if key not in RESERVED_FIELDS:
            body[key] = value
    return body


def build_failure_body(message: str) -> dict:
    return {"error": message}


def failure_status(kind: ErrorKind, missing_parameter_status: int = 500) -> int:
    """HTTP status for a failed pipeline run."""
    match kind:
        case ErrorKind.MISSING_PARAMETER:
            return missing_parameter_status
        case ErrorKind.NOT_FOUND:
            return 404
        case _:
            return 500


def client_message(kind: ErrorKind, message: str, expose_upstream: bool) -> str:
    """Message surfaced to the client.

    Upstream text is passed through verbatim unless exposure is disabled,
    in which case upstream failures collapse to a fixed generic message.
    """
    if expose_upstream:
        return message
    if kind in (
        ErrorKind.UPSTREAM_FAILURE, ErrorKind.UPSTREAM_MALFORMED_RESPONSE,
    ):
        return GENERIC_UPSTREAM_MESSAGE
    return message
