"""Error Hierarchy — typed, categorized exceptions for every gateway failure mode.

Invariants:
    - Every error has a code (str), kind (ErrorKind), severity (ErrorSeverity)
    - to_response() always produces the flat client envelope {"error": message}
    - Upstream error text is carried verbatim in message (sanitizing is an
      envelope-level decision, not an error-level one)

Design Decisions:
    - Single hierarchy with GatewayError base: the pipeline converts any
      GatewayError into a Failure, FastAPI handlers catch the rest
    - MissingCredentialError subclasses UpstreamFailureError: a missing key is
      indistinguishable from an upstream rejection for the client
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """Failure taxonomy surfaced by the gateway."""
    MISSING_PARAMETER = "missing_parameter"
    UPSTREAM_FAILURE = "upstream_failure"
    UPSTREAM_MALFORMED_RESPONSE = "upstream_malformed_response"
    NOT_FOUND = "not_found"


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the flat REST error envelope."""
        return {"error": self.message}


# ─── Request Errors ─────────────────────────────────────────────

class MissingParameterError(GatewayError):
    """A required query parameter is absent or empty."""
    def __init__(self, name: str):
        super().__init__(
            f"Missing required parameter: {name}",
            "MISSING_PARAMETER", ErrorKind.MISSING_PARAMETER,
            ErrorSeverity.WARNING, 500,
        )
        self.name = name


class RouteNotFoundError(GatewayError):
    """No route matches the requested path."""
    def __init__(self, path: str):
        super().__init__(
            "Not found", "NOT_FOUND", ErrorKind.NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.path = path


# ─── Upstream Errors ────────────────────────────────────────────

class UpstreamFailureError(GatewayError):
    """Network error or non-success response from an upstream."""
    def __init__(self, message: str, source: str | None = None):
        super().__init__(
            message, "UPSTREAM_FAILURE", ErrorKind.UPSTREAM_FAILURE,
            ErrorSeverity.ERROR, 500,
        )
        self.source = source


class MissingCredentialError(UpstreamFailureError):
    """Credential required by an upstream is not configured."""
    def __init__(self, env_name: str, source: str | None = None):
        super().__init__(f"{env_name} is not configured", source)
        self.code = "MISSING_CREDENTIAL"
        self.env_name = env_name


class UpstreamMalformedResponseError(GatewayError):
    """Upstream answered, but not in the shape the caller expects."""
    def __init__(self, message: str, source: str | None = None):
        super().__init__(
            message, "UPSTREAM_MALFORMED_RESPONSE",
            ErrorKind.UPSTREAM_MALFORMED_RESPONSE,
            ErrorSeverity.ERROR, 500,
        )
        self.source = source
