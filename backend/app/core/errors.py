"""Failure Taxonomy - typed failure descriptors for every non-success outcome.

Invariants:
    - Every failure has a kind (FailureKind), message (str), and HTTP status (int)
    - to_response() produces the error envelope: {success, error, status[, stack]}
    - A trace is attached to every failure but only rendered when the caller asks
    - Unexpected exceptions never leak their message; they become "Internal server error"

Design Decisions:
    - Failures are returned, not raised: handlers hand a Failure back to the
      dispatch layer, which is the single point that renders it
    - Frozen dataclass: a failure is a value and can be compared in tests
      (trace excluded from equality)
"""

import traceback
from dataclasses import dataclass, field
from enum import Enum

from app.core.domain_types import ResourceKind


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class FailureKind(str, Enum):
    """High-level failure categories, each with a default HTTP status."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    INTERNAL = "internal"

    @property
    def default_status(self) -> int:
        return _DEFAULT_STATUS[self]

    @property
    def severity(self) -> ErrorSeverity:
        if self is FailureKind.INTERNAL:
            return ErrorSeverity.CRITICAL
        return ErrorSeverity.WARNING


_DEFAULT_STATUS = {
    FailureKind.VALIDATION: 400,
    FailureKind.NOT_FOUND: 404,
    FailureKind.ROUTE_NOT_FOUND: 404,
    FailureKind.INTERNAL: 500,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"


@dataclass(frozen=True)
class Failure:
    """A handler outcome that must be rendered as an error envelope."""
    kind: FailureKind
    message: str
    status: int
    trace: str | None = field(default=None, compare=False, repr=False)

    @property
    def code(self) -> str:
        return self.kind.value.upper()

    def to_response(self, include_trace: bool = False) -> dict:
        """Convert to the standardized REST error envelope."""
        body = {"success": False, "error": self.message, "status": self.status}
        if include_trace and self.trace:
            body["stack"] = self.trace
        return body


# ─── Constructors ───────────────────────────────────────────────

def validation_error(message: str) -> Failure:
    """Required input missing or unparseable (400)."""
    return Failure(
        FailureKind.VALIDATION, message,
        FailureKind.VALIDATION.default_status, _capture_trace(),
    )


def not_found(resource: ResourceKind) -> Failure:
    """No entity with the requested id (404)."""
    return Failure(
        FailureKind.NOT_FOUND, f"{resource.value} not found",
        FailureKind.NOT_FOUND.default_status, _capture_trace(),
    )


def internal_error(exc: BaseException) -> Failure:
    """Wrap an unexpected exception. Falls back to 500 when it carries no status."""
    status = getattr(exc, "status_code", None)
    if not isinstance(status, int) or status < 400:
        status = FailureKind.INTERNAL.default_status
    return Failure(
        FailureKind.INTERNAL, INTERNAL_ERROR_MESSAGE, status,
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )


def _capture_trace() -> str:
    # drop this helper and the constructor that called it
    return "".join(traceback.format_stack()[:-2])
